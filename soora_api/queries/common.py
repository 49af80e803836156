# soora_api/queries/common.py
import math
from typing import Any, List, Tuple

from sqlalchemy.orm import Query

from soora_api.schemas.common import Pagination

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def page_window(page: int, limit: int) -> Tuple[int, int]:
    """(skip, take) for a 1-based page."""
    return (page - 1) * limit, limit


def build_pagination(page: int, limit: int, total: int) -> Pagination:
    return Pagination(
        page=page,
        limit=limit,
        total=total,
        pages=math.ceil(total / limit) if limit else 0,
    )


def paginate(query: Query, page: int, limit: int, *order_by: Any) -> Tuple[List[Any], Pagination]:
    """
    Run ``query`` twice: once for the total row count and once for the
    requested page. The count is taken before ordering is applied.
    """
    total = query.order_by(None).count()
    skip, take = page_window(page, limit)
    if order_by:
        query = query.order_by(*order_by)
    rows = query.offset(skip).limit(take).all()
    return rows, build_pagination(page, limit, total)
