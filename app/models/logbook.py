# app/models/logbook.py
# 工作日誌 (含留言) 與公告欄
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from app.models.common import EntityModel


class LogAuthor(BaseModel):
    id: str
    name: str
    avatar_url: str = ""


class LogComment(BaseModel):
    id: str
    author: LogAuthor
    text: str
    created_at: datetime = Field(default_factory=datetime.now)


class LogEntry(EntityModel):
    id: str
    author: LogAuthor
    text: str
    created_at: datetime = Field(default_factory=datetime.now)
    comments: List[LogComment] = Field(default_factory=list)  # 依留言時間排序


class Announcement(EntityModel):
    id: str
    title: str
    text: str
    author: str
    created_at: datetime = Field(default_factory=datetime.now)
