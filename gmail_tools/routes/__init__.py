from fastapi import APIRouter

from gmail_tools.routes.tools_router import router as tools_router

router = APIRouter()
router.include_router(tools_router)
