# app/models/client.py
import enum
from datetime import date
from typing import List

from pydantic import Field

from app.models.common import Address, EntityModel


class ClientStatusEnum(str, enum.Enum):
    active = "Active"
    inactive = "Inactive"


class ClientTypeEnum(str, enum.Enum):
    private = "Private"
    public = "Public"


class Client(EntityModel):
    id: str
    company_name: str
    contact_name: str
    email: str
    phone: str = ""
    status: ClientStatusEnum = ClientStatusEnum.active
    registration_date: date = Field(default_factory=date.today)
    type: ClientTypeEnum
    tax_id: str  # CNPJ / 統一編號
    address: Address

    # --- 關聯 (衍生欄位) ---
    # 只由 relationship_service.reconcile 維護，依加入順序排列
    contract_ids: List[str] = Field(default_factory=list)
