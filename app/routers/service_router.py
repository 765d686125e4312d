# app/routers/service_router.py
from fastapi import APIRouter, Depends, status
from typing import List

from app.core.store import DataStore, get_store
from app.services.service_service import ServiceService
from app.schemas.service_schema import ServiceCreate, ServiceOut, ServiceUpdate

router = APIRouter(
    prefix="/services",
    tags=["Services"]
)

def get_service_service(store: DataStore = Depends(get_store)) -> ServiceService:
    return ServiceService(store)

@router.get("/", response_model=List[ServiceOut])
async def api_list_services(service: ServiceService = Depends(get_service_service)):
    return service.list_services()

@router.post("/", response_model=ServiceOut, status_code=status.HTTP_201_CREATED)
async def api_create_service(
    data: ServiceCreate,
    service: ServiceService = Depends(get_service_service)
):
    return service.create_service(data)

@router.get("/{service_id}", response_model=ServiceOut)
async def api_get_service(
    service_id: str,
    service: ServiceService = Depends(get_service_service)
):
    return service.get_service(service_id)

@router.put("/{service_id}", response_model=ServiceOut)
async def api_update_service(
    service_id: str,
    data: ServiceUpdate,
    service: ServiceService = Depends(get_service_service)
):
    return service.update_service(service_id, data)

@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def api_delete_service(
    service_id: str,
    service: ServiceService = Depends(get_service_service)
):
    service.delete_service(service_id)
    return None
