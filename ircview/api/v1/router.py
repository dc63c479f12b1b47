# file: ircview/api/v1/router.py
from fastapi import APIRouter
from ircview.api.v1.endpoints import archive, search

api_router = APIRouter()
api_router.include_router(archive.router, tags=["Archive"])
api_router.include_router(search.router, prefix="/search", tags=["Search"])
