from fastapi import APIRouter

from category_service.api.v1.endpoints import main_categories

category_router = APIRouter(prefix="/api/v1")

# Main Category Endpoints
category_router.include_router(
    main_categories.router, prefix="/main-categories", tags=["Main Categories"]
)
