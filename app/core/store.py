# app/core/store.py
# 記憶體資料庫：每個實體類型一個以 ID 為 key 的集合
import copy
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from fastapi import Request

logger = logging.getLogger(__name__)

# 所有實體集合名稱 (repository 以此名稱存取)
COLLECTIONS = (
    "clients",
    "contracts",
    "consultants",
    "services",
    "log_entries",
    "announcements",
    "providers",
    "revenues",
)


class DataStore:
    """
    整個應用程式共用的記憶體資料快照。
    每個行程建立一次 (見 app.main 的 lifespan)，透過依賴注入傳給 Service 層。
    """

    def __init__(self):
        self._collections: Dict[str, Dict[str, Any]] = {
            name: {} for name in COLLECTIONS
        }
        self._depth = 0

    def collection(self, name: str) -> Dict[str, Any]:
        return self._collections[name]

    @contextmanager
    def transaction(self) -> Iterator["DataStore"]:
        """
        全有或全無：區塊內拋出例外時，將所有集合還原為進入前的狀態。
        巢狀呼叫只由最外層負責快照與還原。
        """
        if self._depth > 0:
            self._depth += 1
            try:
                yield self
            finally:
                self._depth -= 1
            return

        snapshot = copy.deepcopy(self._collections)
        self._depth = 1
        try:
            yield self
        except Exception:
            # 還原快照 (保持同一個 dict 物件，repository 持有的參照仍有效)
            for name, items in snapshot.items():
                self._collections[name].clear()
                self._collections[name].update(items)
            logger.info("交易失敗，已還原資料")
            raise
        finally:
            self._depth = 0

    def clear(self) -> None:
        for items in self._collections.values():
            items.clear()


# FastAPI Dependency: 取得行程共用的 DataStore
def get_store(request: Request) -> DataStore:
    return request.app.state.store
