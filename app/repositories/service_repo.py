# app/repositories/service_repo.py
from app.models.service import Service
from app.repositories.base_repo import InMemoryRepository


class ServiceRepository(InMemoryRepository[Service]):
    collection_name = "services"
    id_prefix = "SRV"
