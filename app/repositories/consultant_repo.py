# app/repositories/consultant_repo.py
from app.models.consultant import Consultant
from app.repositories.base_repo import InMemoryRepository


class ConsultantRepository(InMemoryRepository[Consultant]):
    collection_name = "consultants"
    id_prefix = "CON"
