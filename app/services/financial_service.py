# app/services/financial_service.py
# 收款紀錄：client_id / contract_id 必須對應既有資料，client_name 由客戶帶入
from typing import List
import logging

from app.core.exceptions import NotFoundError, ValidationError
from app.core.store import DataStore
from app.models.client import Client
from app.models.financial import RevenueTransaction
from app.schemas.financial_schema import RevenueCreate, RevenueUpdate
from app.repositories.revenue_repo import RevenueRepository
from app.services.relationship_service import RelationshipService

logger = logging.getLogger(__name__)


class FinancialService:
    def __init__(self, store: DataStore):
        self.store = store
        self.revenue_repo = RevenueRepository(store)
        self.relationships = RelationshipService(store)

    def _resolve_references(self, client_id: str, contract_id: str) -> Client:
        """
        客戶與合約都必須存在，且合約屬於該客戶
        """
        client = self.relationships.resolve_client(client_id)
        contract = self.relationships.resolve_contract(contract_id)
        if contract.client_id != client.id:
            raise ValidationError(f"合約 {contract.id} 不屬於客戶 {client.id}")
        return client

    def list_revenues(self) -> List[RevenueTransaction]:
        return self.revenue_repo.list_all()

    def get_revenue(self, revenue_id: str) -> RevenueTransaction:
        revenue = self.revenue_repo.get_by_id(revenue_id)
        if not revenue:
            raise NotFoundError("收款紀錄", revenue_id)
        return revenue

    def create_revenue(self, data: RevenueCreate) -> RevenueTransaction:
        with self.store.transaction():
            client = self._resolve_references(data.client_id, data.contract_id)
            revenue = RevenueTransaction(
                id=self.revenue_repo.new_id(),
                client_name=client.company_name,
                **data.model_dump()
            )
            self.revenue_repo.create(revenue)
        logger.info(f"建立收款紀錄 {revenue.id} ({client.company_name}, {revenue.value})")
        return revenue

    def update_revenue(self, revenue_id: str, data: RevenueUpdate) -> RevenueTransaction:
        """
        業務邏輯：更新收款紀錄 (只更新有傳入的欄位)
        變更 client_id 或 contract_id 時重新檢查關聯
        """
        with self.store.transaction():
            revenue = self.get_revenue(revenue_id)
            update_data = data.model_dump(exclude_unset=True)

            if update_data.get("client_id") or update_data.get("contract_id"):
                client = self._resolve_references(
                    update_data.get("client_id") or revenue.client_id,
                    update_data.get("contract_id") or revenue.contract_id
                )
                revenue.client_name = client.company_name

            for key, value in update_data.items():
                # 只有 payment_date 可以被清空
                if value is None and key != "payment_date":
                    continue
                setattr(revenue, key, value)
            self.revenue_repo.update(revenue)
        return revenue

    def delete_revenue(self, revenue_id: str) -> None:
        revenue = self.get_revenue(revenue_id)
        self.revenue_repo.delete(revenue)
        logger.info(f"刪除收款紀錄 {revenue_id}")
