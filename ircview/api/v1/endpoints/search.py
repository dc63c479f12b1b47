# file: ircview/api/v1/endpoints/search.py
import logging
import sqlite3
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from ircview.schemas.models import SearchResponse
from ircview.services.search_service import SearchService

router = APIRouter()
log = logging.getLogger("api.endpoints.search")

def get_search_service(req: Request) -> SearchService:
    return req.app.state.search_service

@router.get("", response_model=SearchResponse)
def search_logs(
    q: str = Query(..., min_length=1, description="Free-text query; Japanese works without spaces."),
    channel: Optional[str] = Query(None, description="Restrict results to one channel."),
    service: SearchService = Depends(get_search_service),
):
    try:
        return service.search(q, channel)
    except sqlite3.Error as e:
        log.error(f"Search failed for q={q!r} channel={channel!r}: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
