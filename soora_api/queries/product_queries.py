# soora_api/queries/product_queries.py
import enum
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from sqlalchemy import or_, true
from sqlalchemy.orm import Query, Session, joinedload

from soora_api.models.category_model import Category
from soora_api.models.product_model import Product
from soora_api.models.review_model import Review
from soora_api.queries.common import paginate
from soora_api.schemas.common import Pagination

ALL_CATEGORIES = "All"
FEATURED_LIMIT = 12


class ProductSortField(str, enum.Enum):
    createdAt = "createdAt"
    price = "price"
    name = "name"
    salesCount = "salesCount"
    viewCount = "viewCount"
    stock = "stock"


class SortOrder(str, enum.Enum):
    asc = "asc"
    desc = "desc"


_SORT_COLUMNS = {
    ProductSortField.createdAt: Product.created_at,
    ProductSortField.price: Product.price,
    ProductSortField.name: Product.name,
    ProductSortField.salesCount: Product.sales_count,
    ProductSortField.viewCount: Product.view_count,
    ProductSortField.stock: Product.stock,
}


@dataclass
class ProductFilters:
    category: Optional[str] = None
    brand: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    search: Optional[str] = None


def slugify(name: str) -> str:
    """Lowercase the name and collapse whitespace runs into single hyphens."""
    return re.sub(r"\s+", "-", name.strip().lower())


class ProductQueries:
    """Catalog read queries shared by the public and admin routers."""

    def apply_filters(self, query: Query, filters: ProductFilters) -> Query:
        if filters.category and filters.category != ALL_CATEGORIES:
            query = query.filter(Product.category == filters.category)

        if filters.brand:
            query = query.filter(Product.brand == filters.brand)

        if filters.min_price is not None:
            query = query.filter(Product.price >= filters.min_price)
        if filters.max_price is not None:
            query = query.filter(Product.price <= filters.max_price)

        if filters.search:
            pattern = f"%{filters.search}%"
            query = query.filter(
                or_(
                    Product.name.ilike(pattern),
                    Product.brand.ilike(pattern),
                    Product.description.ilike(pattern),
                )
            )
        return query

    def order_clause(self, sort_by: ProductSortField, order: SortOrder):
        column = _SORT_COLUMNS[sort_by]
        return column.asc() if order == SortOrder.asc else column.desc()

    def list_products(
        self,
        db: Session,
        filters: ProductFilters,
        page: int,
        limit: int,
        sort_by: ProductSortField = ProductSortField.createdAt,
        order: SortOrder = SortOrder.desc,
        active_only: bool = True,
        is_active: Optional[bool] = None,
    ) -> Tuple[List[Product], Pagination]:
        query = db.query(Product)
        if active_only:
            query = query.filter(Product.is_active == true())
        elif is_active is not None:
            query = query.filter(Product.is_active == is_active)
        query = self.apply_filters(query, filters)
        return paginate(query, page, limit, self.order_clause(sort_by, order), Product.id)

    def get_active_product(self, db: Session, product_id: str) -> Optional[Product]:
        return (
            db.query(Product)
            .filter(Product.id == product_id, Product.is_active == true())
            .first()
        )

    def published_reviews(self, db: Session, product_id: str) -> List[Review]:
        return (
            db.query(Review)
            .options(joinedload(Review.user))
            .filter(Review.product_id == product_id, Review.is_published == true())
            .order_by(Review.created_at.desc())
            .all()
        )

    def increment_view_count(self, db: Session, product_id: str) -> None:
        # single UPDATE so concurrent reads never lose an increment
        (
            db.query(Product)
            .filter(Product.id == product_id)
            .update({Product.view_count: Product.view_count + 1}, synchronize_session=False)
        )

    def featured(self, db: Session, limit: int = FEATURED_LIMIT) -> List[Product]:
        return (
            db.query(Product)
            .filter(Product.is_featured == true(), Product.is_active == true())
            .order_by(Product.sales_count.desc(), Product.id)
            .limit(limit)
            .all()
        )

    def active_categories(self, db: Session) -> List[Category]:
        return (
            db.query(Category)
            .filter(Category.is_active == true())
            .order_by(Category.sort_order.asc(), Category.name.asc())
            .all()
        )

    def unique_slug(self, db: Session, name: str) -> str:
        """
        Slug for ``name``; when it is already taken, append ``-2``, ``-3``...
        until a free one is found.
        """
        base = slugify(name)
        taken = {
            row.slug
            for row in db.query(Product.slug).filter(
                or_(Product.slug == base, Product.slug.like(f"{base}-%"))
            )
        }
        if base not in taken:
            return base
        n = 2
        while f"{base}-{n}" in taken:
            n += 1
        return f"{base}-{n}"


product_queries = ProductQueries()
