"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from servobill.presentation.api.v1.endpoints.health import router as health_router
from servobill.presentation.api.v1.endpoints.customers import router as customers_router
from servobill.presentation.api.v1.endpoints.invoices import router as invoices_router
from servobill.presentation.api.v1.endpoints.products import router as products_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(customers_router)
router.include_router(invoices_router)
router.include_router(products_router)
