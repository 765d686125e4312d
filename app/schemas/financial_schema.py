# app/schemas/financial_schema.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date

from app.models.financial import RevenuePaymentMethodEnum, RevenueStatusEnum

# --- 1. 基礎欄位 (client_name 由客戶資料帶入，不接受輸入) ---
class RevenueBase(BaseModel):
    description: str = Field(..., min_length=1)
    value: float = Field(..., ge=0)
    due_date: date
    payment_date: Optional[date] = None
    status: RevenueStatusEnum = RevenueStatusEnum.pending
    payment_method: RevenuePaymentMethodEnum

# --- 2. 建立 ---
class RevenueCreate(RevenueBase):
    client_id: str
    contract_id: str

# --- 3. 更新 ---
class RevenueUpdate(BaseModel):
    description: Optional[str] = Field(None, min_length=1)
    client_id: Optional[str] = None
    contract_id: Optional[str] = None
    value: Optional[float] = Field(None, ge=0)
    due_date: Optional[date] = None
    payment_date: Optional[date] = None
    status: Optional[RevenueStatusEnum] = None
    payment_method: Optional[RevenuePaymentMethodEnum] = None

# --- 4. 輸出 ---
class RevenueOut(RevenueBase):
    model_config = ConfigDict(from_attributes=True)
    id: str
    client_id: Optional[str]
    client_name: Optional[str]
    contract_id: Optional[str]
