# app/models/contract.py
import enum
from datetime import date
from typing import Optional

from pydantic import BaseModel

from app.models.common import EntityModel


class ContractStatusEnum(str, enum.Enum):
    negotiating = "Negotiating"
    awaiting_signature = "AwaitingSignature"
    active = "Active"
    expired = "Expired"
    rejected = "Rejected"
    pending = "Pending"
    completed = "Completed"
    inactive = "Inactive"


class PaymentMethodEnum(str, enum.Enum):
    monthly = "Monthly"
    one_time = "OneTime"
    installments = "Installments"


class HiringTypeEnum(str, enum.Enum):
    private = "Private"
    public_bid = "PublicBid"
    bid_exemption = "BidExemption"


class ResponsibleContact(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None
    whatsapp: Optional[str] = None


class Contract(EntityModel):
    id: str

    # --- 關聯 ---
    # client_id 為 None 表示客戶已刪除且策略為 orphan
    client_id: Optional[str] = None
    # client_name 是 Client.company_name 的快取，由 relationship_service 同步
    client_name: Optional[str] = None

    # --- 合約內容 ---
    title: str
    start_date: date
    end_date: date
    manager: str
    status: ContractStatusEnum = ContractStatusEnum.negotiating

    # --- 財務 ---
    annual_value: float
    payment_method: PaymentMethodEnum
    monthly_value: Optional[float] = None  # 僅月付合約

    # --- 聘用方式 ---
    hiring_type: HiringTypeEnum
    services_description: str = ""

    responsible_contact: ResponsibleContact
