# app/repositories/logbook_repo.py
from typing import List

from app.models.logbook import Announcement, LogEntry
from app.repositories.base_repo import InMemoryRepository, short_id


class LogEntryRepository(InMemoryRepository[LogEntry]):
    collection_name = "log_entries"
    id_prefix = "LOG"
    comment_prefix = "COMMENT"

    def list_latest(self) -> List[LogEntry]:
        """
        (R) 日誌列表 (依時間降序排列)
        """
        # 同一時間建立者，後加入的排前面
        return sorted(reversed(list(self.items.values())), key=lambda e: e.created_at, reverse=True)

    def new_comment_id(self) -> str:
        """產生所有日誌留言中唯一的 ID (e.g., COMMENT-1A2B3C4D)"""
        used = {c.id for entry in self.items.values() for c in entry.comments}
        while True:
            candidate = short_id(self.comment_prefix)
            if candidate not in used:
                return candidate


class AnnouncementRepository(InMemoryRepository[Announcement]):
    collection_name = "announcements"
    id_prefix = "ANNOUNCE"

    def list_latest(self) -> List[Announcement]:
        """
        (R) 公告列表 (依時間降序排列)
        """
        return sorted(reversed(list(self.items.values())), key=lambda a: a.created_at, reverse=True)
