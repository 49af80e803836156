# soora_api/gateway/gateway_router.py
from fastapi import APIRouter

from soora_api.routers.admin_router import router as admin_router
from soora_api.routers.delivery_router import router as delivery_router
from soora_api.routers.orders_router import router as orders_router
from soora_api.routers.products_router import router as products_router
from soora_api.routers.users_router import router as users_router

gateway_router = APIRouter(prefix="/api")

# public catalog
gateway_router.include_router(products_router)        # /api/products/...

# authenticated customer routes
gateway_router.include_router(users_router)           # /api/users/...
gateway_router.include_router(orders_router)          # /api/orders/...
gateway_router.include_router(delivery_router)        # /api/delivery/...

# ADMIN only
gateway_router.include_router(admin_router)           # /api/admin/...
