from fastapi import APIRouter

from app.api.routes import catalog, optimize

api_router = APIRouter()
api_router.include_router(catalog.router)
api_router.include_router(optimize.router)
