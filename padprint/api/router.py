from fastapi import APIRouter

from padprint.api.pad.routes import router as pad_router

router = APIRouter()
router.include_router(pad_router)
