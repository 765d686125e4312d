# app/repositories/provider_repo.py
from app.models.provider import ServiceProvider
from app.repositories.base_repo import InMemoryRepository, short_id


class ProviderRepository(InMemoryRepository[ServiceProvider]):
    collection_name = "providers"
    id_prefix = "PRV"
    offered_service_prefix = "OS"

    def new_offered_service_id(self, used: set) -> str:
        """產生供應商服務目錄內唯一的 ID (e.g., OS-1A2B3C4D)"""
        while True:
            candidate = short_id(self.offered_service_prefix)
            if candidate not in used:
                return candidate
