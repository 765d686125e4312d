# app/services/contract_service.py

from typing import List
import logging

from app.core.exceptions import NotFoundError, ValidationError
from app.core.store import DataStore
from app.models.contract import Contract, ContractStatusEnum, PaymentMethodEnum
from app.schemas.contract_schema import ContractCreate, ContractDraft, ContractUpdate
from app.repositories.contract_repo import ContractRepository
from app.services.relationship_service import RelationshipService

logger = logging.getLogger(__name__)


def validate_contract(contract: Contract) -> None:
    """
    領域限制檢查 (欄位型別已由 Schema 驗證)
    """
    if contract.start_date > contract.end_date:
        raise ValidationError("合約開始日期不可晚於結束日期")
    if contract.annual_value < 0:
        raise ValidationError("年度金額不可為負數")
    if contract.payment_method == PaymentMethodEnum.monthly:
        if contract.monthly_value is None:
            raise ValidationError("月付合約必須填寫月付金額")
    elif contract.monthly_value is not None:
        raise ValidationError("只有月付合約可以填寫月付金額")


class ContractService:
    def __init__(self, store: DataStore):
        self.store = store
        self.contract_repo = ContractRepository(store)
        self.relationships = RelationshipService(store)

    def build_contract(self, data: ContractDraft, client_id: str) -> Contract:
        """
        由輸入資料建立 (尚未存入的) 合約物件並套用預設值
        """
        fields = data.model_dump(exclude={"status", "client_id"})
        contract = Contract(
            id=self.contract_repo.new_id(),
            client_id=client_id,
            status=data.status or ContractStatusEnum.negotiating,
            **fields
        )
        validate_contract(contract)
        return contract

    def list_contracts(self) -> List[Contract]:
        return self.contract_repo.list_all()

    def get_contract(self, contract_id: str) -> Contract:
        contract = self.contract_repo.get_by_id(contract_id)
        if not contract:
            raise NotFoundError("合約", contract_id)
        return contract

    def create_contract(self, data: ContractCreate) -> Contract:
        """
        業務邏輯：建立合約
        client_id 必須對應到既有客戶，client_name 由客戶資料帶入
        """
        contract = self.build_contract(data, data.client_id)
        with self.store.transaction():
            # 先確認客戶存在，失敗時不會寫入任何資料
            self.relationships.resolve_client(contract.client_id)
            self.contract_repo.create(contract)
            self.relationships.on_contract_created(contract)
        logger.info(f"建立合約 {contract.id} ({contract.title})")
        return contract

    def update_contract(self, contract_id: str, data: ContractUpdate) -> Contract:
        """
        業務邏輯：更新合約 (只更新有傳入的欄位)
        """
        with self.store.transaction():
            contract = self.get_contract(contract_id)
            update_data = data.model_dump(exclude_unset=True)

            if "client_id" in update_data:
                if update_data["client_id"] is None:
                    raise ValidationError("合約必須指定客戶")
                # 新客戶不存在時直接失敗
                self.relationships.resolve_client(update_data["client_id"])

            # 改為非月付且未一併提供月付金額時，清除舊的月付金額
            new_method = update_data.get("payment_method")
            if (
                new_method is not None
                and new_method != PaymentMethodEnum.monthly
                and "monthly_value" not in update_data
            ):
                update_data["monthly_value"] = None

            previous_client_id = contract.client_id
            for key, value in update_data.items():
                # 只有 monthly_value 可以被清空
                if value is None and key != "monthly_value":
                    continue
                setattr(contract, key, value)
            validate_contract(contract)

            self.contract_repo.update(contract)
            self.relationships.on_contract_updated(contract, previous_client_id)
        return contract

    def delete_contract(self, contract_id: str) -> None:
        with self.store.transaction():
            contract = self.get_contract(contract_id)
            self.contract_repo.delete(contract)
            self.relationships.on_contract_deleted(contract)
        logger.info(f"刪除合約 {contract_id}")
