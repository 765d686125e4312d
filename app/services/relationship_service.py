# app/services/relationship_service.py
# 維護 Client <-> Contract (及收款紀錄) 的一致性：
#   Contract.client_name == Client.company_name
#   RevenueTransaction.client_name == Client.company_name
#   set(Client.contract_ids) == { c.id : c.client_id == Client.id }
import logging
from typing import Iterable, List, Optional

from app.core.config import ClientDeletePolicy
from app.core.exceptions import ConflictError, ReferenceNotFoundError
from app.core.store import DataStore
from app.models.client import Client
from app.models.contract import Contract
from app.models.financial import RevenueTransaction
from app.repositories.client_repo import ClientRepository
from app.repositories.contract_repo import ContractRepository
from app.repositories.revenue_repo import RevenueRepository

logger = logging.getLogger(__name__)


def reconcile(client: Client, contracts: Iterable[Contract]) -> List[Contract]:
    """
    依合約集合重新計算客戶的衍生欄位，回傳此客戶持有的合約。

    - contract_ids：保留原有 ID 的相對順序，新持有的合約依集合順序附加在後
    - 每份持有合約的 client_name 改為目前的 company_name
    """
    owned = [c for c in contracts if c.client_id == client.id]
    owned_ids = {c.id for c in owned}

    kept = []
    for contract_id in client.contract_ids:
        if contract_id in owned_ids and contract_id not in kept:
            kept.append(contract_id)
    appended = [c.id for c in owned if c.id not in kept]
    client.contract_ids = kept + appended

    for contract in owned:
        contract.client_name = client.company_name
    return owned


class RelationshipService:
    """
    Client / Contract 異動後的同步步驟。
    呼叫端必須已在 store.transaction() 內，失敗時由交易還原。
    """

    def __init__(self, store: DataStore):
        self.store = store
        self.client_repo = ClientRepository(store)
        self.contract_repo = ContractRepository(store)
        self.revenue_repo = RevenueRepository(store)

    def resolve_client(self, client_id: Optional[str]) -> Client:
        client = self.client_repo.get_by_id(client_id) if client_id else None
        if not client:
            raise ReferenceNotFoundError("客戶", str(client_id))
        return client

    def sync_client(self, client: Client) -> List[Contract]:
        return reconcile(client, self.contract_repo.list_all())

    def on_contract_created(self, contract: Contract) -> None:
        client = self.resolve_client(contract.client_id)
        self.sync_client(client)
        logger.info(f"合約 {contract.id} 已加入客戶 {client.id}")

    def on_contract_updated(self, contract: Contract, previous_client_id: Optional[str]) -> None:
        if previous_client_id and previous_client_id != contract.client_id:
            previous = self.client_repo.get_by_id(previous_client_id)
            if previous:
                self.sync_client(previous)
            logger.info(f"合約 {contract.id} 由客戶 {previous_client_id} 移轉至 {contract.client_id}")
        # 已解除關聯 (orphan) 的合約沒有客戶需要同步
        if contract.client_id is not None:
            self.sync_client(self.resolve_client(contract.client_id))

    def on_contract_deleted(self, contract: Contract) -> None:
        client = self.client_repo.get_by_id(contract.client_id) if contract.client_id else None
        if client:
            self.sync_client(client)
        self.detach_revenues_from_contract(contract)

    def on_client_updated(self, client: Client) -> None:
        # 立即更新所有合約與收款紀錄的 client_name (不可讓讀取端看到舊名稱)
        refreshed = self.sync_client(client)
        revenues = self.refresh_revenues(client)
        logger.info(
            f"客戶 {client.id} 同步 {len(refreshed)} 份合約、{len(revenues)} 筆收款的 client_name"
        )

    def on_client_deleted(self, client: Client, policy: ClientDeletePolicy) -> None:
        """
        依刪除策略處理客戶持有的合約與收款紀錄 (在客戶移除之前呼叫)
        """
        owned = self.contract_repo.list_contracts_by_client(client.id)
        revenues = self.revenue_repo.list_revenues_by_client(client.id)
        if not owned and not revenues:
            return

        if policy == ClientDeletePolicy.reject:
            raise ConflictError(
                f"客戶 {client.id} 仍有 {len(owned)} 份合約、{len(revenues)} 筆收款，無法刪除"
            )

        if policy == ClientDeletePolicy.cascade:
            for revenue in revenues:
                self.revenue_repo.delete(revenue)
            for contract in owned:
                self.contract_repo.delete(contract)
                self.detach_revenues_from_contract(contract)
            logger.info(f"刪除客戶 {client.id}，連帶刪除 {len(owned)} 份合約、{len(revenues)} 筆收款")
        else:
            for contract in owned:
                contract.client_id = None
                contract.client_name = None
                self.contract_repo.update(contract)
            for revenue in revenues:
                revenue.client_id = None
                revenue.client_name = None
                self.revenue_repo.update(revenue)
            logger.info(f"刪除客戶 {client.id}，{len(owned)} 份合約、{len(revenues)} 筆收款解除關聯")

        client.contract_ids = []

    # --- 收款紀錄 ---
    def resolve_contract(self, contract_id: Optional[str]) -> Contract:
        contract = self.contract_repo.get_by_id(contract_id) if contract_id else None
        if not contract:
            raise ReferenceNotFoundError("合約", str(contract_id))
        return contract

    def refresh_revenues(self, client: Client) -> List[RevenueTransaction]:
        revenues = self.revenue_repo.list_revenues_by_client(client.id)
        for revenue in revenues:
            revenue.client_name = client.company_name
        return revenues

    def detach_revenues_from_contract(self, contract: Contract) -> None:
        # 收款紀錄保留，只移除已不存在的合約參照
        for revenue in self.revenue_repo.list_revenues_by_contract(contract.id):
            revenue.contract_id = None
            self.revenue_repo.update(revenue)
