# soora_api/schemas/__init__.py

# shared
from .common import CamelModel, Pagination, MessageOut, ErrorOut, ValidationErrorOut

# products
from .products import (
    ProductCreate, ProductUpdate, StockUpdate, ProductOut, ProductDetailOut,
    ProductListOut, ReviewOut, CategoryOut,
)

# users / addresses
from .users import (
    ProfileOut, ProfileUpdate, ProfileUpdateOut,
    AddressCreate, AddressUpdate, AddressOut,
    AdminUserOut, AdminUserListOut, TierUpdate, TierUpdateOut,
)

# orders
from .orders import (
    OrderCreate, OrderItemIn, OrderStatusUpdate, OrderOut, OrderItemOut,
    OrderListOut, TrackingOut,
)

# admin analytics
from .admin import DashboardStats, SalesReport

__all__ = [
    "CamelModel", "Pagination", "MessageOut", "ErrorOut", "ValidationErrorOut",
    "ProductCreate", "ProductUpdate", "StockUpdate", "ProductOut", "ProductDetailOut",
    "ProductListOut", "ReviewOut", "CategoryOut",
    "ProfileOut", "ProfileUpdate", "ProfileUpdateOut",
    "AddressCreate", "AddressUpdate", "AddressOut",
    "AdminUserOut", "AdminUserListOut", "TierUpdate", "TierUpdateOut",
    "OrderCreate", "OrderItemIn", "OrderStatusUpdate", "OrderOut", "OrderItemOut",
    "OrderListOut", "TrackingOut",
    "DashboardStats", "SalesReport",
]
