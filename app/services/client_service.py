# app/services/client_service.py

from datetime import date
from typing import List, Optional, Tuple
import logging

from app.core.config import ClientDeletePolicy, settings
from app.core.exceptions import NotFoundError
from app.core.store import DataStore
from app.models.client import Client, ClientStatusEnum
from app.models.contract import Contract
from app.schemas.client_schema import ClientCreate, ClientUpdate, ClientWithContractCreate
from app.repositories.client_repo import ClientRepository
from app.repositories.contract_repo import ContractRepository
from app.services.contract_service import ContractService
from app.services.relationship_service import RelationshipService

logger = logging.getLogger(__name__)


class ClientService:
    def __init__(self, store: DataStore, delete_policy: Optional[ClientDeletePolicy] = None):
        self.store = store
        self.client_repo = ClientRepository(store)
        self.contract_repo = ContractRepository(store)
        self.relationships = RelationshipService(store)
        self.delete_policy = delete_policy or settings.CLIENT_DELETE_POLICY

    def _build_client(self, data: ClientCreate) -> Client:
        fields = data.model_dump(exclude={"status", "registration_date"})
        return Client(
            id=self.client_repo.new_id(),
            status=data.status or ClientStatusEnum.active,
            registration_date=data.registration_date or date.today(),
            contract_ids=[],
            **fields
        )

    def list_clients(self) -> List[Client]:
        return self.client_repo.list_all()

    def get_client(self, client_id: str) -> Client:
        client = self.client_repo.get_by_id(client_id)
        if not client:
            raise NotFoundError("客戶", client_id)
        return client

    def list_client_contracts(self, client_id: str) -> List[Contract]:
        """
        (API 用) 依 contract_ids 的順序回傳客戶的合約
        """
        client = self.get_client(client_id)
        return [self.contract_repo.get_by_id(cid) for cid in client.contract_ids]

    def create_client(self, data: ClientCreate) -> Client:
        client = self._build_client(data)
        with self.store.transaction():
            self.client_repo.create(client)
        logger.info(f"建立客戶 {client.id} ({client.company_name})")
        return client

    def create_client_with_contract(self, data: ClientWithContractCreate) -> Tuple[Client, Contract]:
        """
        業務邏輯：新客戶與第一份合約一起建立 (任一失敗則都不建立)
        """
        contract_service = ContractService(self.store)
        with self.store.transaction():
            client = self._build_client(data.client)
            self.client_repo.create(client)
            contract = contract_service.build_contract(data.contract, client.id)
            self.contract_repo.create(contract)
            self.relationships.on_contract_created(contract)
        logger.info(f"建立客戶 {client.id} 及合約 {contract.id}")
        return client, contract

    def update_client(self, client_id: str, data: ClientUpdate) -> Client:
        """
        業務邏輯：更新客戶 (只更新有傳入的欄位)
        改名時，所有合約的 client_name 會在同一個交易內更新
        """
        with self.store.transaction():
            client = self.get_client(client_id)
            update_data = data.model_dump(exclude_unset=True)
            renamed = (
                "company_name" in update_data
                and update_data["company_name"] != client.company_name
            )
            for key, value in update_data.items():
                if value is not None:
                    setattr(client, key, value)

            self.client_repo.update(client)
            self.relationships.on_client_updated(client)

        if renamed:
            logger.info(f"客戶 {client_id} 更名為 {client.company_name}")
        return client

    def delete_client(self, client_id: str) -> None:
        """
        業務邏輯：刪除客戶，持有合約時依 delete_policy 處理
        """
        with self.store.transaction():
            client = self.get_client(client_id)
            self.relationships.on_client_deleted(client, self.delete_policy)
            self.client_repo.delete(client)
        logger.info(f"刪除客戶 {client_id} (策略: {self.delete_policy.value})")
