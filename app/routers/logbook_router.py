# app/routers/logbook_router.py
from fastapi import APIRouter, Depends, status
from typing import List

from app.core.store import DataStore, get_store
from app.services.logbook_service import LogbookService
from app.schemas.logbook_schema import (
    AnnouncementCreate, AnnouncementOut, AnnouncementUpdate,
    LogCommentCreate, LogEntryCreate, LogEntryOut, LogEntryUpdate
)

router = APIRouter(
    prefix="/logbook",
    tags=["Logbook"]
)

def get_logbook_service(store: DataStore = Depends(get_store)) -> LogbookService:
    return LogbookService(store)

# --- 日誌 ---
@router.get("/entries", response_model=List[LogEntryOut], summary="日誌列表 (新到舊)")
async def api_list_entries(service: LogbookService = Depends(get_logbook_service)):
    return service.list_entries()

@router.post("/entries", response_model=LogEntryOut, status_code=status.HTTP_201_CREATED)
async def api_add_entry(
    data: LogEntryCreate,
    service: LogbookService = Depends(get_logbook_service)
):
    return service.add_entry(data)

@router.get("/entries/{entry_id}", response_model=LogEntryOut)
async def api_get_entry(
    entry_id: str,
    service: LogbookService = Depends(get_logbook_service)
):
    return service.get_entry(entry_id)

@router.put("/entries/{entry_id}", response_model=LogEntryOut)
async def api_update_entry(
    entry_id: str,
    data: LogEntryUpdate,
    service: LogbookService = Depends(get_logbook_service)
):
    return service.update_entry(entry_id, data)

@router.post(
    "/entries/{entry_id}/comments",
    response_model=LogEntryOut,
    status_code=status.HTTP_201_CREATED,
    summary="新增留言"
)
async def api_add_comment(
    entry_id: str,
    data: LogCommentCreate,
    service: LogbookService = Depends(get_logbook_service)
):
    return service.add_comment(entry_id, data)

@router.delete("/entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def api_delete_entry(
    entry_id: str,
    service: LogbookService = Depends(get_logbook_service)
):
    service.delete_entry(entry_id)
    return None

# --- 公告 ---
@router.get("/announcements", response_model=List[AnnouncementOut], summary="公告列表 (新到舊)")
async def api_list_announcements(service: LogbookService = Depends(get_logbook_service)):
    return service.list_announcements()

@router.post("/announcements", response_model=AnnouncementOut, status_code=status.HTTP_201_CREATED)
async def api_add_announcement(
    data: AnnouncementCreate,
    service: LogbookService = Depends(get_logbook_service)
):
    return service.add_announcement(data)

@router.get("/announcements/{announcement_id}", response_model=AnnouncementOut)
async def api_get_announcement(
    announcement_id: str,
    service: LogbookService = Depends(get_logbook_service)
):
    return service.get_announcement(announcement_id)

@router.put("/announcements/{announcement_id}", response_model=AnnouncementOut)
async def api_update_announcement(
    announcement_id: str,
    data: AnnouncementUpdate,
    service: LogbookService = Depends(get_logbook_service)
):
    return service.update_announcement(announcement_id, data)

@router.delete("/announcements/{announcement_id}", status_code=status.HTTP_204_NO_CONTENT)
async def api_delete_announcement(
    announcement_id: str,
    service: LogbookService = Depends(get_logbook_service)
):
    service.delete_announcement(announcement_id)
    return None
