# app/schemas/report_schema.py
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date

from app.schemas.contract_schema import ContractOut

# 1. 單一服務的損益
class ServicePerformanceOut(BaseModel):
    service_id: str
    client_name: str
    status: str
    contract_id: Optional[str] = Field(None, description="依 client_name 對應到的合約")
    revenue: float
    costs: float
    profit: float
    profit_margin: float = Field(..., description="利潤率 (%)")

# 2. 摘要 (沒有服務時 most/least_profitable 為 "N/A")
class ReportSummaryOut(BaseModel):
    most_profitable: str
    least_profitable: str
    total_profit: float
    completed_services: int

# 3. 服務損益報表
class ServiceReportOut(BaseModel):
    rows: List[ServicePerformanceOut]
    summary: ReportSummaryOut

# 4. 儀表板
class ExpenseCategoryOut(BaseModel):
    category: str
    value: float

class DashboardOut(BaseModel):
    reference_date: date
    receivables: float
    pending_negotiation: float
    total_expenses: float
    expenses_by_category: List[ExpenseCategoryOut]
    upcoming_deadlines: List[ContractOut]
