# app/models/financial.py
import enum
from datetime import date
from typing import Optional

from app.models.common import EntityModel


class RevenueStatusEnum(str, enum.Enum):
    received = "Received"  # 已收款
    pending = "Pending"
    overdue = "Overdue"    # 逾期


class RevenuePaymentMethodEnum(str, enum.Enum):
    annual = "Annual"
    installments = "Installments"
    one_time = "OneTime"
    monthly = "Monthly"


class RevenueTransaction(EntityModel):
    id: str
    description: str
    # 客戶刪除 (orphan 策略) 或合約刪除後會變成 None
    client_id: Optional[str] = None
    client_name: Optional[str] = None  # Client.company_name 的快取
    contract_id: Optional[str] = None
    value: float
    due_date: date
    payment_date: Optional[date] = None
    status: RevenueStatusEnum = RevenueStatusEnum.pending
    payment_method: RevenuePaymentMethodEnum
