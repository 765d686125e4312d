# app/models/service.py
# 服務 (顧問案執行紀錄)，報表以 client_name 與合約對應
import enum
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.common import EntityModel


class ServiceStatusEnum(str, enum.Enum):
    in_progress = "InProgress"
    pending = "Pending"
    completed = "Completed"
    cancelled = "Cancelled"


class ServiceTypeEnum(str, enum.Enum):
    on_site = "OnSite"
    online = "Online"
    hybrid = "Hybrid"


class ReviewStatusEnum(str, enum.Enum):
    pending = "Pending"
    approved = "Approved"
    rejected = "Rejected"


class ServiceCosts(BaseModel):
    travel: float = Field(0, ge=0)
    accommodation: float = Field(0, ge=0)
    food: float = Field(0, ge=0)
    transport: float = Field(0, ge=0)


class WorkPlan(BaseModel):
    status: ReviewStatusEnum = ReviewStatusEnum.pending
    content: str
    feedback: Optional[str] = None


class FinalReport(BaseModel):
    submitted_by: str
    content: str
    file_url: Optional[str] = None
    submitted_at: datetime
    status: ReviewStatusEnum = ReviewStatusEnum.pending
    feedback: Optional[str] = None


class Service(EntityModel):
    id: str
    client_name: str
    project_manager: str = ""
    status: ServiceStatusEnum = ServiceStatusEnum.pending
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    type: ServiceTypeEnum = ServiceTypeEnum.on_site
    description: Optional[str] = None
    consultants: List[str] = Field(default_factory=list)
    costs: ServiceCosts = Field(default_factory=ServiceCosts)
    work_plan: Optional[WorkPlan] = None
    final_report: Optional[FinalReport] = None
