# app/services/logbook_service.py
# 工作日誌 (含留言) 與公告欄
from datetime import datetime
from typing import List
import logging

from app.core.exceptions import NotFoundError
from app.core.store import DataStore
from app.models.logbook import Announcement, LogComment, LogEntry
from app.schemas.logbook_schema import (
    AnnouncementCreate, AnnouncementUpdate, LogCommentCreate,
    LogEntryCreate, LogEntryUpdate
)
from app.repositories.logbook_repo import AnnouncementRepository, LogEntryRepository

logger = logging.getLogger(__name__)


class LogbookService:
    def __init__(self, store: DataStore):
        self.store = store
        self.entry_repo = LogEntryRepository(store)
        self.announcement_repo = AnnouncementRepository(store)

    # --- 日誌 ---
    def list_entries(self) -> List[LogEntry]:
        return self.entry_repo.list_latest()

    def get_entry(self, entry_id: str) -> LogEntry:
        entry = self.entry_repo.get_by_id(entry_id)
        if not entry:
            raise NotFoundError("日誌", entry_id)
        return entry

    def add_entry(self, data: LogEntryCreate) -> LogEntry:
        entry = LogEntry(
            id=self.entry_repo.new_id(),
            author=data.author,
            text=data.text,
            created_at=datetime.now(),
            comments=[]
        )
        self.entry_repo.create(entry)
        logger.info(f"{data.author.name} 新增日誌 {entry.id}")
        return entry

    def update_entry(self, entry_id: str, data: LogEntryUpdate) -> LogEntry:
        entry = self.get_entry(entry_id)
        if data.text is not None:
            entry.text = data.text
        return self.entry_repo.update(entry)

    def add_comment(self, entry_id: str, data: LogCommentCreate) -> LogEntry:
        """
        在日誌下新增留言 (附加在最後)
        """
        entry = self.get_entry(entry_id)
        comment = LogComment(
            id=self.entry_repo.new_comment_id(),
            author=data.author,
            text=data.text,
            created_at=datetime.now()
        )
        entry.comments = entry.comments + [comment]
        self.entry_repo.update(entry)
        return entry

    def delete_entry(self, entry_id: str) -> None:
        entry = self.get_entry(entry_id)
        self.entry_repo.delete(entry)

    # --- 公告 ---
    def list_announcements(self) -> List[Announcement]:
        return self.announcement_repo.list_latest()

    def get_announcement(self, announcement_id: str) -> Announcement:
        announcement = self.announcement_repo.get_by_id(announcement_id)
        if not announcement:
            raise NotFoundError("公告", announcement_id)
        return announcement

    def add_announcement(self, data: AnnouncementCreate) -> Announcement:
        announcement = Announcement(
            id=self.announcement_repo.new_id(),
            created_at=datetime.now(),
            **data.model_dump()
        )
        self.announcement_repo.create(announcement)
        logger.info(f"新增公告 {announcement.id}: {announcement.title}")
        return announcement

    def update_announcement(self, announcement_id: str, data: AnnouncementUpdate) -> Announcement:
        announcement = self.get_announcement(announcement_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(announcement, key, value)
        return self.announcement_repo.update(announcement)

    def delete_announcement(self, announcement_id: str) -> None:
        announcement = self.get_announcement(announcement_id)
        self.announcement_repo.delete(announcement)
