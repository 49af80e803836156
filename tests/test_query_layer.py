# tests/test_query_layer.py
import math
from types import SimpleNamespace

import pytest

from soora_api.queries.admin_queries import summarize_sales
from soora_api.queries.common import build_pagination, page_window
from soora_api.queries.product_queries import ProductQueries, slugify


@pytest.mark.parametrize(
    "page,limit,expected",
    [(1, 20, (0, 20)), (2, 20, (20, 20)), (3, 7, (14, 7))],
)
def test_page_window(page, limit, expected):
    assert page_window(page, limit) == expected


@pytest.mark.parametrize("total,limit", [(0, 20), (1, 20), (20, 20), (21, 20), (99, 10), (5, 1)])
def test_pages_is_ceiling_of_total_over_limit(total, limit):
    p = build_pagination(1, limit, total)
    assert p.pages == math.ceil(total / limit)
    assert p.total == total


def test_slugify_lowercases_and_collapses_whitespace():
    assert slugify("Red Silk Scarf ") == "red-silk-scarf"
    assert slugify("  Big   Wool\tBlanket") == "big-wool-blanket"


def test_unique_slug_appends_suffix_on_collision(db, make_product):
    make_product(name="Red Silk Scarf")
    make_product(name="Red Silk Scarf 2", slug="red-silk-scarf-2")

    assert ProductQueries().unique_slug(db, "Red Silk Scarf") == "red-silk-scarf-3"
    assert ProductQueries().unique_slug(db, "Blue Silk Scarf") == "blue-silk-scarf"


def test_summarize_sales_averages_over_orders():
    orders = [SimpleNamespace(total=30.0), SimpleNamespace(total=70.0), SimpleNamespace(total=50.0)]

    summary = summarize_sales(orders)

    assert summary.total_revenue == pytest.approx(150.0)
    assert summary.total_orders == 3
    assert summary.average_order_value == pytest.approx(50.0)


def test_summarize_sales_with_no_orders_is_zero():
    summary = summarize_sales([])

    assert summary.total_revenue == 0
    assert summary.total_orders == 0
    assert summary.average_order_value == 0
