# soora_api/schemas/admin.py
from typing import List

from soora_api.schemas.common import CamelModel
from soora_api.schemas.orders import OrderOut


class DashboardStats(CamelModel):
    total_orders: int
    pending_orders: int
    total_revenue: float
    total_users: int
    low_stock_products: int


class SalesReport(CamelModel):
    total_revenue: float
    total_orders: int
    average_order_value: float
    orders: List[OrderOut]
