# app/schemas/consultant_schema.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.models.common import Address
from app.models.consultant import (
    BankDetails, ConsultantContact, ConsultantContractTypeEnum,
    EmploymentTypeEnum, PaymentDetails
)

class ConsultantBase(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=255)
    tax_id: str = Field(..., min_length=1)
    address: Address
    education: str = ""
    specialty: str = ""
    contact: ConsultantContact
    bank_details: BankDetails
    employment_type: EmploymentTypeEnum
    payment_details: PaymentDetails
    contract_type: ConsultantContractTypeEnum = ConsultantContractTypeEnum.contract

class ConsultantCreate(ConsultantBase):
    pass

# 切換 employment_type 時必須一併傳入新的 payment_details
class ConsultantUpdate(BaseModel):
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    tax_id: Optional[str] = Field(None, min_length=1)
    address: Optional[Address] = None
    education: Optional[str] = None
    specialty: Optional[str] = None
    contact: Optional[ConsultantContact] = None
    bank_details: Optional[BankDetails] = None
    employment_type: Optional[EmploymentTypeEnum] = None
    payment_details: Optional[PaymentDetails] = None
    contract_type: Optional[ConsultantContractTypeEnum] = None

class ConsultantOut(ConsultantBase):
    model_config = ConfigDict(from_attributes=True)
    id: str
