# app/schemas/service_schema.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import date

from app.models.service import (
    FinalReport, ServiceCosts, ServiceStatusEnum, ServiceTypeEnum, WorkPlan
)

class ServiceBase(BaseModel):
    client_name: str = Field(..., min_length=1)  # 報表依此名稱對應合約
    project_manager: str = ""
    status: ServiceStatusEnum = ServiceStatusEnum.pending
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    type: ServiceTypeEnum = ServiceTypeEnum.on_site
    description: Optional[str] = None
    consultants: List[str] = []
    costs: ServiceCosts = ServiceCosts()
    work_plan: Optional[WorkPlan] = None
    final_report: Optional[FinalReport] = None

class ServiceCreate(ServiceBase):
    pass

class ServiceUpdate(BaseModel):
    client_name: Optional[str] = Field(None, min_length=1)
    project_manager: Optional[str] = None
    status: Optional[ServiceStatusEnum] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    type: Optional[ServiceTypeEnum] = None
    description: Optional[str] = None
    consultants: Optional[List[str]] = None
    costs: Optional[ServiceCosts] = None
    work_plan: Optional[WorkPlan] = None
    final_report: Optional[FinalReport] = None

class ServiceOut(ServiceBase):
    model_config = ConfigDict(from_attributes=True)
    id: str
