# app/services/provider_service.py
from typing import List
import logging

from app.core.exceptions import NotFoundError, ValidationError
from app.core.store import DataStore
from app.models.provider import OfferedService, ServiceProvider
from app.schemas.provider_schema import OfferedServiceIn, ProviderCreate, ProviderUpdate
from app.repositories.provider_repo import ProviderRepository

logger = logging.getLogger(__name__)


class ProviderService:
    def __init__(self, store: DataStore):
        self.store = store
        self.repo = ProviderRepository(store)

    def _build_offered_services(self, items: List[OfferedServiceIn]) -> List[OfferedService]:
        """
        檢查服務目錄：金額不可為負、同一供應商內 id 不可重複，缺少的 id 由系統產生
        """
        given = [item.id for item in items if item.id]
        duplicated = {i for i in given if given.count(i) > 1}
        if duplicated:
            raise ValidationError(f"服務目錄 ID 重複: {', '.join(sorted(duplicated))}")

        used = set(given)
        offered = []
        for item in items:
            if item.value < 0:
                raise ValidationError(f"服務 {item.name} 的金額不可為負數")
            service_id = item.id
            if not service_id:
                service_id = self.repo.new_offered_service_id(used)
                used.add(service_id)
            offered.append(OfferedService(id=service_id, **item.model_dump(exclude={"id"})))
        return offered

    def list_providers(self) -> List[ServiceProvider]:
        return self.repo.list_all()

    def get_provider(self, provider_id: str) -> ServiceProvider:
        provider = self.repo.get_by_id(provider_id)
        if not provider:
            raise NotFoundError("供應商", provider_id)
        return provider

    def create_provider(self, data: ProviderCreate) -> ServiceProvider:
        provider = ServiceProvider(
            id=self.repo.new_id(),
            offered_services=self._build_offered_services(data.offered_services),
            **data.model_dump(exclude={"offered_services"})
        )
        self.repo.create(provider)
        logger.info(f"建立供應商 {provider.id} ({provider.company_name})")
        return provider

    def update_provider(self, provider_id: str, data: ProviderUpdate) -> ServiceProvider:
        with self.store.transaction():
            provider = self.get_provider(provider_id)
            update_data = data.model_dump(exclude_unset=True, exclude={"offered_services"})
            if data.offered_services is not None:
                provider.offered_services = self._build_offered_services(data.offered_services)
            for key, value in update_data.items():
                # bank_details 可以被清空
                if value is None and key != "bank_details":
                    continue
                setattr(provider, key, value)
            self.repo.update(provider)
        return provider

    def delete_provider(self, provider_id: str) -> None:
        provider = self.get_provider(provider_id)
        self.repo.delete(provider)
        logger.info(f"刪除供應商 {provider_id}")
