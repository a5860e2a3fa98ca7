from fastapi import APIRouter

from coupon_service.api.v1.endpoints import coupons

coupon_router = APIRouter(prefix="/api/v1")

coupon_router.include_router(
    coupons.router, prefix="/coupons", tags=["Coupons"]
)
