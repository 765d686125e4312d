# app/routers/financial_router.py
from fastapi import APIRouter, Depends, status
from typing import List

from app.core.store import DataStore, get_store
from app.services.financial_service import FinancialService
from app.schemas.financial_schema import RevenueCreate, RevenueOut, RevenueUpdate

router = APIRouter(
    prefix="/financial",
    tags=["Financial"]
)

def get_financial_service(store: DataStore = Depends(get_store)) -> FinancialService:
    return FinancialService(store)

@router.get("/revenues", response_model=List[RevenueOut], summary="收款紀錄列表")
async def api_list_revenues(service: FinancialService = Depends(get_financial_service)):
    return service.list_revenues()

@router.post(
    "/revenues",
    response_model=RevenueOut,
    status_code=status.HTTP_201_CREATED,
    summary="新增收款紀錄"
)
async def api_create_revenue(
    data: RevenueCreate,
    service: FinancialService = Depends(get_financial_service)
):
    return service.create_revenue(data)

@router.get("/revenues/{revenue_id}", response_model=RevenueOut, summary="取得收款紀錄")
async def api_get_revenue(
    revenue_id: str,
    service: FinancialService = Depends(get_financial_service)
):
    return service.get_revenue(revenue_id)

@router.put("/revenues/{revenue_id}", response_model=RevenueOut, summary="更新收款紀錄")
async def api_update_revenue(
    revenue_id: str,
    data: RevenueUpdate,
    service: FinancialService = Depends(get_financial_service)
):
    return service.update_revenue(revenue_id, data)

@router.delete("/revenues/{revenue_id}", status_code=status.HTTP_204_NO_CONTENT, summary="刪除收款紀錄")
async def api_delete_revenue(
    revenue_id: str,
    service: FinancialService = Depends(get_financial_service)
):
    service.delete_revenue(revenue_id)
    return None
