from fastapi import APIRouter

from category_service.api.routes import category_router
from coupon_service.api.routes import coupon_router

api_router = APIRouter()

api_router.include_router(category_router)
api_router.include_router(coupon_router)
