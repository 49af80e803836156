# soora_client/api_client.py
from typing import Any, Dict, List, Optional
import os, requests

API_BASE_URL = os.getenv("SOORA_API_URL", "http://localhost:3001/api")


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


def _url(p: str) -> str:
    return f"{API_BASE_URL}{p}"


def _headers(token: Optional[str]) -> Dict[str, str]:
    h = {"Content-Type": "application/json"}
    if token:
        h["Authorization"] = f"Bearer {token}"
    return h


def _err(resp: requests.Response) -> str:
    try:
        j = resp.json()
    except ValueError:
        return resp.text or resp.reason or f"HTTP {resp.status_code}"
    if isinstance(j, dict):
        if j.get("error"):
            return str(j["error"])
        if j.get("errors"):
            return "; ".join(f"{e.get('field')}: {e.get('message')}" for e in j["errors"])
        if j.get("message"):
            return str(j["message"])
    return str(j)


def request(method: str, endpoint: str, token: Optional[str] = None, timeout: float = 10, **kwargs) -> Any:
    """Send one request to the API; raise ApiError on any 4xx/5xx."""
    r = requests.request(method, _url(endpoint), headers=_headers(token), timeout=timeout, **kwargs)
    if r.status_code >= 400:
        raise ApiError(_err(r), r.status_code)
    if r.status_code == 204 or not r.content:
        return None
    return r.json()


def _drop_none(params: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


# ---- Catalog ----
def get_products(
    category: Optional[str] = None,
    brand: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    search: Optional[str] = None,
    page: int = 1,
    limit: int = 20,
    sort_by: str = "createdAt",
    order: str = "desc",
) -> Dict[str, Any]:
    params = _drop_none({
        "category": category,
        "brand": brand,
        "minPrice": min_price,
        "maxPrice": max_price,
        "search": search,
        "page": page,
        "limit": limit,
        "sortBy": sort_by,
        "order": order,
    })
    return request("GET", "/products", params=params)


def get_product(product_id: str) -> Dict[str, Any]:
    return request("GET", f"/products/{product_id}")


def get_featured_products() -> List[Dict[str, Any]]:
    return request("GET", "/products/featured/list")


def get_categories() -> List[Dict[str, Any]]:
    return request("GET", "/products/categories/list")


# ---- Profile & addresses ----
def get_profile(token: str) -> Dict[str, Any]:
    return request("GET", "/users/profile", token=token)


def update_profile(token: str, name: Optional[str] = None, phone: Optional[str] = None) -> Dict[str, Any]:
    return request("PUT", "/users/profile", token=token, json=_drop_none({"name": name, "phone": phone}))


def get_addresses(token: str) -> List[Dict[str, Any]]:
    return request("GET", "/users/addresses", token=token)


def create_address(token: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    return request("POST", "/users/addresses", token=token, json=payload)


def update_address(token: str, address_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    return request("PUT", f"/users/addresses/{address_id}", token=token, json=payload)


def delete_address(token: str, address_id: str) -> Dict[str, Any]:
    return request("DELETE", f"/users/addresses/{address_id}", token=token)


# ---- Orders ----
def place_order(token: str, address_id: str, items: List[Dict[str, Any]], notes: Optional[str] = None) -> Dict[str, Any]:
    payload = _drop_none({"addressId": address_id, "items": items, "notes": notes})
    return request("POST", "/orders", token=token, json=payload, timeout=20)


def get_my_orders(token: str, status: Optional[str] = None, page: int = 1, limit: int = 20) -> Dict[str, Any]:
    return request("GET", "/orders", token=token, params=_drop_none({"status": status, "page": page, "limit": limit}))


def get_order_tracking(token: str, order_id: str) -> Dict[str, Any]:
    return request("GET", f"/delivery/{order_id}/tracking", token=token)


# ---- Admin ----
def admin_get_products(token: str, search: Optional[str] = None, category: Optional[str] = None,
                       is_active: Optional[bool] = None, page: int = 1, limit: int = 20) -> Dict[str, Any]:
    params = _drop_none({"search": search, "category": category, "isActive": None if is_active is None else str(is_active).lower(), "page": page, "limit": limit})
    return request("GET", "/admin/products", token=token, params=params)


def admin_create_product(token: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    return request("POST", "/admin/products", token=token, json=payload)


def admin_update_product(token: str, product_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    return request("PUT", f"/admin/products/{product_id}", token=token, json=payload)


def admin_deactivate_product(token: str, product_id: str) -> Dict[str, Any]:
    return request("DELETE", f"/admin/products/{product_id}", token=token)


def admin_get_orders(token: str, status: Optional[str] = None, page: int = 1, limit: int = 20) -> Dict[str, Any]:
    return request("GET", "/admin/orders", token=token, params=_drop_none({"status": status, "page": page, "limit": limit}))


def admin_get_users(token: str, page: int = 1, limit: int = 20) -> Dict[str, Any]:
    return request("GET", "/admin/users", token=token, params={"page": page, "limit": limit})


def admin_update_user_tier(token: str, user_id: str, tier: str) -> Dict[str, Any]:
    return request("PUT", f"/admin/users/{user_id}/tier", token=token, json={"tier": tier})


def admin_update_order_status(token: str, order_id: str, status: str) -> Dict[str, Any]:
    return request("PUT", f"/admin/orders/{order_id}/status", token=token, json={"status": status})


def admin_update_stock(token: str, product_id: str, stock: int) -> Dict[str, Any]:
    return request("PUT", f"/admin/products/{product_id}/stock", token=token, json={"stock": stock})


def admin_get_stats(token: str) -> Dict[str, Any]:
    return request("GET", "/admin/stats", token=token)


def admin_get_sales_report(token: str, start_date: Optional[str] = None, end_date: Optional[str] = None) -> Dict[str, Any]:
    params = _drop_none({"startDate": start_date, "endDate": end_date})
    return request("GET", "/admin/reports/sales", token=token, params=params, timeout=30)
