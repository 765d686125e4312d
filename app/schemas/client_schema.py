# app/schemas/client_schema.py

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import List, Optional
from datetime import date

from app.models.client import ClientStatusEnum, ClientTypeEnum
from app.models.common import Address
from app.schemas.contract_schema import ContractDraft, ContractOut

# --- 1. 基礎欄位 ---
class ClientBase(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=255)
    contact_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: str = ""
    type: ClientTypeEnum
    tax_id: str = Field(..., min_length=1)
    address: Address

# --- 2. 建立客戶 (Input) ---
# status / registration_date 未提供時由 Service 層套用預設值
class ClientCreate(ClientBase):
    status: Optional[ClientStatusEnum] = None
    registration_date: Optional[date] = None

# --- 3. 更新客戶 (Input) ---
# (所有欄位皆可選，只更新有傳入的欄位)
# contract_ids 為衍生欄位，不開放直接修改
class ClientUpdate(BaseModel):
    company_name: Optional[str] = Field(None, min_length=1, max_length=255)
    contact_name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    status: Optional[ClientStatusEnum] = None
    registration_date: Optional[date] = None
    type: Optional[ClientTypeEnum] = None
    tax_id: Optional[str] = Field(None, min_length=1)
    address: Optional[Address] = None

# --- 4. 同時建立客戶與第一份合約 (Input) ---
class ClientWithContractCreate(BaseModel):
    client: ClientCreate
    contract: ContractDraft

# --- 5. 完整客戶 (Output) ---
class ClientOut(ClientBase):
    model_config = ConfigDict(from_attributes=True)
    id: str
    status: ClientStatusEnum
    registration_date: date
    contract_ids: List[str] = []

# --- 6. 同時建立客戶與合約 (Output) ---
class ClientWithContractOut(BaseModel):
    client: ClientOut
    contract: ContractOut
