# file: ircview/api/v1/endpoints/archive.py
import logging
import sqlite3
from fastapi import APIRouter, Depends, HTTPException, Request
from ircview.schemas.models import ChannelList, LogDateList, LogRecord
from ircview.services.archive_service import ArchiveService

router = APIRouter()
log = logging.getLogger("api.endpoints.archive")

def get_archive_service(req: Request) -> ArchiveService:
    return req.app.state.archive_service

@router.get("/channels", response_model=ChannelList)
def list_channels(
    service: ArchiveService = Depends(get_archive_service),
):
    try:
        return ChannelList(channels=service.list_channels())
    except sqlite3.Error as e:
        log.error(f"Failed to list channels: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.get("/channels/{channel}/dates", response_model=LogDateList)
def list_log_dates(
    channel: str,
    service: ArchiveService = Depends(get_archive_service),
):
    try:
        return LogDateList(channel=channel, log_dates=service.list_log_dates(channel))
    except sqlite3.Error as e:
        log.error(f"Failed to list log dates for '{channel}': {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.get("/logs/{channel}/{log_date}", response_model=LogRecord)
def get_log(
    channel: str,
    log_date: str,
    service: ArchiveService = Depends(get_archive_service),
):
    try:
        record = service.get_log(channel, log_date)
    except sqlite3.Error as e:
        log.error(f"Failed to load log {channel}/{log_date}: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
    if not record:
        raise HTTPException(status_code=404, detail=f"No log for '{channel}' on '{log_date}'.")
    return record
