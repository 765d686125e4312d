# app/models/consultant.py
import enum
from typing import Optional

from pydantic import BaseModel

from app.models.common import Address, EntityModel


class EmploymentTypeEnum(str, enum.Enum):
    fixed = "Fixed"          # 固定月薪
    on_demand = "OnDemand"   # 按時計酬


class ConsultantContractTypeEnum(str, enum.Enum):
    contract = "Contract"
    other = "Other"


class ConsultantContact(BaseModel):
    email: str
    whatsapp: str = ""


class BankDetails(BaseModel):
    bank: str
    agency: str
    account: str
    pix: str = ""


class PaymentDetails(BaseModel):
    # 依 employment_type 只會有其中一個 (由 consultant_service 檢查)
    monthly_salary: Optional[float] = None
    hourly_rate: Optional[float] = None


class Consultant(EntityModel):
    id: str
    full_name: str
    tax_id: str  # CPF
    address: Address
    education: str = ""
    specialty: str = ""
    contact: ConsultantContact
    bank_details: BankDetails
    employment_type: EmploymentTypeEnum
    payment_details: PaymentDetails
    contract_type: ConsultantContractTypeEnum = ConsultantContractTypeEnum.contract
