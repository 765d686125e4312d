# app/routers/consultant_router.py
from fastapi import APIRouter, Depends, status
from typing import List

from app.core.store import DataStore, get_store
from app.services.consultant_service import ConsultantService
from app.schemas.consultant_schema import ConsultantCreate, ConsultantOut, ConsultantUpdate

router = APIRouter(
    prefix="/consultants",
    tags=["Consultants"]
)

def get_consultant_service(store: DataStore = Depends(get_store)) -> ConsultantService:
    return ConsultantService(store)

@router.get("/", response_model=List[ConsultantOut])
async def api_list_consultants(service: ConsultantService = Depends(get_consultant_service)):
    return service.list_consultants()

@router.post("/", response_model=ConsultantOut, status_code=status.HTTP_201_CREATED)
async def api_create_consultant(
    data: ConsultantCreate,
    service: ConsultantService = Depends(get_consultant_service)
):
    return service.create_consultant(data)

@router.get("/{consultant_id}", response_model=ConsultantOut)
async def api_get_consultant(
    consultant_id: str,
    service: ConsultantService = Depends(get_consultant_service)
):
    return service.get_consultant(consultant_id)

@router.put("/{consultant_id}", response_model=ConsultantOut)
async def api_update_consultant(
    consultant_id: str,
    data: ConsultantUpdate,
    service: ConsultantService = Depends(get_consultant_service)
):
    return service.update_consultant(consultant_id, data)

@router.delete("/{consultant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def api_delete_consultant(
    consultant_id: str,
    service: ConsultantService = Depends(get_consultant_service)
):
    service.delete_consultant(consultant_id)
    return None
