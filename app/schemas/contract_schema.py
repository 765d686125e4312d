# app/schemas/contract_schema.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date

from app.models.contract import (
    ContractStatusEnum, HiringTypeEnum, PaymentMethodEnum, ResponsibleContact
)

# --- 1. 基礎欄位 ---
class ContractBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    start_date: date
    end_date: date
    manager: str = Field(..., min_length=1)
    annual_value: float = Field(..., ge=0)
    payment_method: PaymentMethodEnum
    monthly_value: Optional[float] = Field(None, ge=0)
    hiring_type: HiringTypeEnum
    services_description: str = ""
    responsible_contact: ResponsibleContact

# --- 2. 合約草案 (Input) ---
# 不含 client_id，用於「同時建立客戶與合約」
class ContractDraft(ContractBase):
    status: Optional[ContractStatusEnum] = None

# --- 3. 建立合約 (Input) ---
# client_name 不由前端傳入，Service 層會依 client_id 帶入
class ContractCreate(ContractDraft):
    client_id: str = Field(..., min_length=1)

# --- 4. 更新合約 (Input) ---
# (所有欄位皆可選) 若 client_id 改變，會同步兩邊客戶的 contract_ids
class ContractUpdate(BaseModel):
    client_id: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    manager: Optional[str] = Field(None, min_length=1)
    status: Optional[ContractStatusEnum] = None
    annual_value: Optional[float] = Field(None, ge=0)
    payment_method: Optional[PaymentMethodEnum] = None
    monthly_value: Optional[float] = Field(None, ge=0)
    hiring_type: Optional[HiringTypeEnum] = None
    services_description: Optional[str] = None
    responsible_contact: Optional[ResponsibleContact] = None

# --- 5. 完整合約 (Output) ---
class ContractOut(ContractBase):
    model_config = ConfigDict(from_attributes=True)
    id: str
    client_id: Optional[str]
    client_name: Optional[str]
    status: ContractStatusEnum
