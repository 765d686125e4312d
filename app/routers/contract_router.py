# app/routers/contract_router.py

from fastapi import APIRouter, Depends, status
from typing import List

from app.core.store import DataStore, get_store
from app.services.contract_service import ContractService
from app.schemas.contract_schema import ContractCreate, ContractOut, ContractUpdate

router = APIRouter(
    prefix="/contracts",
    tags=["Contracts"] # API 文件分組
)

# 輔助函式：在路由中快速實例化 Service
def get_contract_service(store: DataStore = Depends(get_store)) -> ContractService:
    return ContractService(store)

@router.get("/", response_model=List[ContractOut], summary="合約列表")
async def api_list_contracts(service: ContractService = Depends(get_contract_service)):
    return service.list_contracts()

@router.post(
    "/",
    response_model=ContractOut,
    status_code=status.HTTP_201_CREATED,
    summary="建立合約"
)
async def api_create_contract(
    contract_data: ContractCreate,
    service: ContractService = Depends(get_contract_service)
):
    """
    client_id 必須對應到既有客戶 (否則 400)，
    client_name 由後端依客戶資料帶入，狀態預設為 Negotiating。
    """
    return service.create_contract(contract_data)

@router.get("/{contract_id}", response_model=ContractOut, summary="合約詳情")
async def api_get_contract_details(
    contract_id: str,
    service: ContractService = Depends(get_contract_service)
):
    return service.get_contract(contract_id)

@router.put("/{contract_id}", response_model=ContractOut, summary="更新合約")
async def api_update_contract(
    contract_id: str,
    data: ContractUpdate,
    service: ContractService = Depends(get_contract_service)
):
    """
    只更新有傳入的欄位；變更 client_id 時會同步新舊客戶的 contract_ids。
    """
    return service.update_contract(contract_id, data)

@router.delete(
    "/{contract_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="刪除合約"
)
async def api_delete_contract(
    contract_id: str,
    service: ContractService = Depends(get_contract_service)
):
    service.delete_contract(contract_id)
    return None # 204 No Content
