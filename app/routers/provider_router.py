# app/routers/provider_router.py
from fastapi import APIRouter, Depends, status
from typing import List

from app.core.store import DataStore, get_store
from app.services.provider_service import ProviderService
from app.schemas.provider_schema import ProviderCreate, ProviderOut, ProviderUpdate

router = APIRouter(
    prefix="/providers",
    tags=["Providers"]
)

def get_provider_service(store: DataStore = Depends(get_store)) -> ProviderService:
    return ProviderService(store)

@router.get("/", response_model=List[ProviderOut], summary="列出所有服務供應商")
async def api_list_providers(service: ProviderService = Depends(get_provider_service)):
    return service.list_providers()

@router.post("/", response_model=ProviderOut, status_code=status.HTTP_201_CREATED, summary="新增服務供應商")
async def api_create_provider(
    data: ProviderCreate,
    service: ProviderService = Depends(get_provider_service)
):
    return service.create_provider(data)

@router.get("/{provider_id}", response_model=ProviderOut, summary="取得服務供應商")
async def api_get_provider(
    provider_id: str,
    service: ProviderService = Depends(get_provider_service)
):
    return service.get_provider(provider_id)

@router.put("/{provider_id}", response_model=ProviderOut, summary="更新服務供應商")
async def api_update_provider(
    provider_id: str,
    data: ProviderUpdate,
    service: ProviderService = Depends(get_provider_service)
):
    return service.update_provider(provider_id, data)

@router.delete("/{provider_id}", status_code=status.HTTP_204_NO_CONTENT, summary="刪除服務供應商")
async def api_delete_provider(
    provider_id: str,
    service: ProviderService = Depends(get_provider_service)
):
    service.delete_provider(provider_id)
    return None
