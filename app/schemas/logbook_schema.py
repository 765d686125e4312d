# app/schemas/logbook_schema.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime

from app.models.logbook import LogAuthor

# --- 日誌 ---
class LogEntryCreate(BaseModel):
    author: LogAuthor
    text: str = Field(..., min_length=1)

class LogEntryUpdate(BaseModel):
    text: Optional[str] = Field(None, min_length=1)

class LogCommentCreate(BaseModel):
    author: LogAuthor
    text: str = Field(..., min_length=1)

class LogCommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    author: LogAuthor
    text: str
    created_at: datetime

class LogEntryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    author: LogAuthor
    text: str
    created_at: datetime
    comments: List[LogCommentOut] = []

# --- 公告 ---
class AnnouncementCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    text: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)

class AnnouncementUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    text: Optional[str] = Field(None, min_length=1)

class AnnouncementOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    title: str
    text: str
    author: str
    created_at: datetime
