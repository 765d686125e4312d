# app/repositories/revenue_repo.py
from typing import List

from app.models.financial import RevenueTransaction
from app.repositories.base_repo import InMemoryRepository


class RevenueRepository(InMemoryRepository[RevenueTransaction]):
    collection_name = "revenues"
    id_prefix = "REC"

    def list_revenues_by_client(self, client_id: str) -> List[RevenueTransaction]:
        return [r for r in self.items.values() if r.client_id == client_id]

    def list_revenues_by_contract(self, contract_id: str) -> List[RevenueTransaction]:
        return [r for r in self.items.values() if r.contract_id == contract_id]
