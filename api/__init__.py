from fastapi import APIRouter
from .testapi import router as testapi_router

router = APIRouter()
router.include_router(testapi_router)
