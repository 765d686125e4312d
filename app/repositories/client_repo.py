# app/repositories/client_repo.py
from app.models.client import Client
from app.repositories.base_repo import InMemoryRepository


class ClientRepository(InMemoryRepository[Client]):
    """
    封裝對 'clients' 集合的 CRUD 操作
    """
    collection_name = "clients"
    id_prefix = "CLI"
