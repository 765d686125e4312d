# app/schemas/provider_schema.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.models.common import Address
from app.models.consultant import BankDetails
from app.models.provider import BillingTypeEnum, OfferedService, ProviderContact

# --- 1. 服務目錄項目 (未帶 id 時由系統產生) ---
class OfferedServiceIn(BaseModel):
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    billing_type: BillingTypeEnum
    value: float
    professionals: List[str] = []

# --- 2. 基礎欄位 ---
class ProviderBase(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=255)
    cnpj: str = Field(..., min_length=1)
    address: Address
    contact: ProviderContact
    professionals: List[str] = []
    bank_details: Optional[BankDetails] = None

# --- 3. 建立 ---
class ProviderCreate(ProviderBase):
    offered_services: List[OfferedServiceIn] = []

# --- 4. 更新 (offered_services 整份取代) ---
class ProviderUpdate(BaseModel):
    company_name: Optional[str] = Field(None, min_length=1, max_length=255)
    cnpj: Optional[str] = Field(None, min_length=1)
    address: Optional[Address] = None
    contact: Optional[ProviderContact] = None
    offered_services: Optional[List[OfferedServiceIn]] = None
    professionals: Optional[List[str]] = None
    bank_details: Optional[BankDetails] = None

# --- 5. 輸出 ---
class ProviderOut(ProviderBase):
    model_config = ConfigDict(from_attributes=True)
    id: str
    offered_services: List[OfferedService]
