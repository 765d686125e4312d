# app/routers/report_router.py
from fastapi import APIRouter, Depends, Query
from datetime import date
from typing import Optional

from app.core.store import DataStore, get_store
from app.services.report_service import ReportService
from app.schemas.report_schema import DashboardOut, ServiceReportOut

router = APIRouter(
    prefix="/reports",
    tags=["Reports"]
)

def get_report_service(store: DataStore = Depends(get_store)) -> ReportService:
    return ReportService(store)

@router.get("/services", response_model=ServiceReportOut, summary="服務損益報表")
async def api_service_report(service: ReportService = Depends(get_report_service)):
    """
    每筆服務以 client_name 對應第一份同名合約，計算營收、成本、利潤與利潤率。
    """
    return service.service_report()

@router.get("/dashboard", response_model=DashboardOut, summary="儀表板財務指標")
async def api_dashboard(
    today: Optional[date] = Query(None, description="計算基準日 (預設為今天)"),
    days: Optional[int] = Query(None, gt=0, description="即將到期的天數範圍"),
    service: ReportService = Depends(get_report_service)
):
    return service.dashboard(today=today, horizon_days=days)
