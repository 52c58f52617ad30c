from fastapi import APIRouter
from api.routes.system import router as system_router
from api.routes.chat import router as chat_router
from api.routes.notifications import router as notifications_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(chat_router, prefix="/api")
api_router.include_router(notifications_router, prefix="/api")
