from fastapi import APIRouter
from .auth import router as auth_router
from .preview import router as preview_router
from .access import router as access_router
from .checklists import router as checklists_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(preview_router)
api_router.include_router(access_router)
api_router.include_router(checklists_router)
