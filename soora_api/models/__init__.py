# soora_api/models/__init__.py
from .enums import AddressType, OrderStatus, UserRole, UserTier
from .user_model import User
from .address_model import Address
from .category_model import Category
from .product_model import Product
from .review_model import Review
from .order_model import Order
from .order_item_model import OrderItem
