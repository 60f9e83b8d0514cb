from fastapi import APIRouter

from tense_tutor.api.v1.endpoints import analysis, spelling

api_router = APIRouter()
api_router.include_router(
    analysis.router,
    prefix='/analysis',
    tags=['analysis'],
)
api_router.include_router(
    spelling.router,
    prefix='/spelling',
    tags=['spelling'],
)
