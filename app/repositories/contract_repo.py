# app/repositories/contract_repo.py
from typing import List

from app.models.contract import Contract
from app.repositories.base_repo import InMemoryRepository


class ContractRepository(InMemoryRepository[Contract]):
    """
    封裝對 'contracts' 集合的 CRUD 操作
    """
    collection_name = "contracts"
    id_prefix = "CTR"

    def list_contracts_by_client(self, client_id: str) -> List[Contract]:
        """
        (R) 獲取某個客戶的所有合約 (依加入順序)
        """
        return [c for c in self.items.values() if c.client_id == client_id]
