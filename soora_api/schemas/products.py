# soora_api/schemas/products.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field, constr

from soora_api.schemas.common import CamelModel, Pagination

NameStr = constr(strip_whitespace=True, min_length=1, max_length=200)


class ProductCreate(CamelModel):
    name: NameStr
    description: Optional[str] = None
    price: float = Field(ge=0)
    stock: int = Field(default=0, ge=0)
    category: Optional[str] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None
    is_active: bool = True
    is_featured: bool = False
    low_stock_alert: int = Field(default=10, ge=0)


class ProductUpdate(CamelModel):
    name: Optional[NameStr] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    stock: Optional[int] = Field(default=None, ge=0)
    category: Optional[str] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    low_stock_alert: Optional[int] = Field(default=None, ge=0)


class StockUpdate(CamelModel):
    stock: int = Field(ge=0)


class ProductOut(CamelModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    price: float
    stock: int
    category: Optional[str] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None
    is_active: bool
    is_featured: bool
    view_count: int
    sales_count: int
    low_stock_alert: int
    created_at: datetime
    updated_at: datetime


class ReviewerOut(CamelModel):
    name: Optional[str] = None
    email: str


class ReviewOut(CamelModel):
    id: str
    rating: int
    title: Optional[str] = None
    comment: Optional[str] = None
    created_at: datetime
    user: ReviewerOut


class ProductDetailOut(ProductOut):
    reviews: List[ReviewOut] = []


class ProductListOut(CamelModel):
    products: List[ProductOut]
    pagination: Pagination


class CategoryOut(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    sort_order: int
    is_active: bool
