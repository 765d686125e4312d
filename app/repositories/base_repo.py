# app/repositories/base_repo.py
import uuid
from typing import Dict, Generic, List, Optional, TypeVar

from app.core.store import DataStore
from app.models.common import EntityModel

T = TypeVar("T", bound=EntityModel)


def short_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"


class InMemoryRepository(Generic[T]):
    """
    封裝對單一實體集合的 CRUD 操作
    (子類別設定 collection_name 與 id_prefix)
    """
    collection_name: str = ""
    id_prefix: str = ""

    def __init__(self, store: DataStore):
        self.store = store

    @property
    def items(self) -> Dict[str, T]:
        return self.store.collection(self.collection_name)

    def new_id(self) -> str:
        """產生此集合內唯一的 ID (e.g., CTR-1A2B3C4D)"""
        while True:
            candidate = short_id(self.id_prefix)
            if candidate not in self.items:
                return candidate

    def create(self, entity: T) -> T:
        """
        (C) 新增實體，ID 重複時拒絕
        """
        if entity.id in self.items:
            raise ValueError(f"重複的 ID: {entity.id}")
        self.items[entity.id] = entity
        return entity

    def get_by_id(self, entity_id: str) -> Optional[T]:
        """
        (R) 透過 ID 獲取單一實體
        """
        return self.items.get(entity_id)

    def list_all(self) -> List[T]:
        """
        (R) 依加入順序列出全部
        """
        return list(self.items.values())

    def update(self, entity: T) -> T:
        """
        (U) 儲存對現有實體的變更 (Service 層已直接修改物件)
        """
        self.items[entity.id] = entity
        return entity

    def delete(self, entity: T) -> None:
        """
        (D) 從集合移除
        """
        self.items.pop(entity.id, None)
