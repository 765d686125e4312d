# app/models/provider.py
# 服務供應商 (公司)：提供的服務目錄與執行人員
import enum
from typing import List, Optional

from pydantic import BaseModel

from app.models.common import Address, EntityModel
from app.models.consultant import BankDetails


class BillingTypeEnum(str, enum.Enum):
    hourly = "Hourly"  # 按時計費
    fixed = "Fixed"    # 固定價格


class ProviderContact(BaseModel):
    name: str
    email: str
    phone: str = ""


class OfferedService(BaseModel):
    id: str
    name: str
    billing_type: BillingTypeEnum
    value: float  # 時薪或專案總價
    professionals: List[str] = []


class ServiceProvider(EntityModel):
    id: str
    company_name: str
    cnpj: str
    address: Address
    contact: ProviderContact
    offered_services: List[OfferedService] = []
    professionals: List[str] = []
    bank_details: Optional[BankDetails] = None
