# app/routers/client_router.py

from fastapi import APIRouter, Depends, status
from typing import List

from app.core.store import DataStore, get_store
from app.services.client_service import ClientService
from app.schemas.client_schema import (
    ClientCreate, ClientOut, ClientUpdate, ClientWithContractCreate, ClientWithContractOut
)
from app.schemas.contract_schema import ContractOut

router = APIRouter(
    prefix="/clients",
    tags=["Clients"] # API 文件分組
)

# 輔助函式：在路由中快速實例化 Service
def get_client_service(store: DataStore = Depends(get_store)) -> ClientService:
    return ClientService(store)

@router.get("/", response_model=List[ClientOut], summary="客戶列表")
async def api_list_clients(service: ClientService = Depends(get_client_service)):
    return service.list_clients()

@router.post(
    "/",
    response_model=ClientOut,
    status_code=status.HTTP_201_CREATED,
    summary="新增客戶"
)
async def api_create_client(
    data: ClientCreate,
    service: ClientService = Depends(get_client_service)
):
    return service.create_client(data)

@router.post(
    "/with-contract",
    response_model=ClientWithContractOut,
    status_code=status.HTTP_201_CREATED,
    summary="新增客戶並建立第一份合約"
)
async def api_create_client_with_contract(
    data: ClientWithContractCreate,
    service: ClientService = Depends(get_client_service)
):
    """
    客戶與合約在同一個交易內建立，任一驗證失敗則兩者都不建立。
    """
    client, contract = service.create_client_with_contract(data)
    return {"client": client, "contract": contract}

@router.get("/{client_id}", response_model=ClientOut, summary="客戶詳情")
async def api_get_client(
    client_id: str,
    service: ClientService = Depends(get_client_service)
):
    return service.get_client(client_id)

@router.get(
    "/{client_id}/contracts",
    response_model=List[ContractOut],
    summary="客戶的合約列表"
)
async def api_list_client_contracts(
    client_id: str,
    service: ClientService = Depends(get_client_service)
):
    return service.list_client_contracts(client_id)

@router.put("/{client_id}", response_model=ClientOut, summary="更新客戶")
async def api_update_client(
    client_id: str,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service)
):
    """
    只更新有傳入的欄位。
    修改 company_name 時，該客戶所有合約的 client_name 會一併更新。
    """
    return service.update_client(client_id, data)

@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="刪除客戶"
)
async def api_delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service)
):
    """
    客戶仍有合約時，依 CLIENT_DELETE_POLICY 處理 (reject / cascade / orphan)。
    """
    service.delete_client(client_id)
    return None # 204 No Content
