import math
import time
from typing import Optional

from okefin.schemas import Pagination

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def generate_slug(name: str) -> str:
    # Not checked for uniqueness
    return name.replace(" ", "-").lower()


def format_price(harga: float) -> str:
    return f"{harga:.2f}"


def parse_price(price_str: Optional[str]) -> float:
    try:
        return float(price_str)
    except (TypeError, ValueError):
        return 0.0


def generate_invoice_code(now_ns: Optional[int] = None) -> str:
    """INV-<unix seconds>-<microseconds of the current second>."""
    now_ns = time.time_ns() if now_ns is None else now_ns
    seconds, nanos = divmod(now_ns, 1_000_000_000)
    return f"INV-{seconds}-{nanos // 1000:06d}"


def parse_positive_int(value: Optional[str], default: int) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 1 else default


def total_pages(total_items: int, limit: int) -> int:
    return math.ceil(total_items / limit) if limit > 0 else 0


def build_pagination(page: int, limit: int, total_items: int) -> Pagination:
    return Pagination(
        current_page=page,
        total_pages=total_pages(total_items, limit),
        total_items=total_items,
        limit=limit,
    )
