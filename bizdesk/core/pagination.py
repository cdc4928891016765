from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar
import math
from bizdesk.schemas.common import Page, Pagination

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, per_page: int) -> Page:
    """Slice an already-fetched list: page K of size P holds items [(K-1)P, KP)."""
    if per_page < 1:
        raise ValueError("per_page must be at least 1")
    page = max(page, 1)
    total = len(items)
    start = (page - 1) * per_page
    end = start + per_page
    last_page = max(math.ceil(total / per_page), 1)

    pagination = Pagination(
        current_page=page,
        last_page=last_page,
        per_page=per_page,
        total=total,
        from_=start + 1 if total > 0 and start < total else None,
        to=min(end, total) if total > 0 and start < total else None,
        has_more_pages=page < last_page,
    )
    return Page(items=list(items[start:end]), pagination=pagination)


def search_filter(items: Iterable[T], search: Optional[str],
                  fields: Callable[[T], Iterable[Optional[str]]]) -> List[T]:
    """Case-insensitive substring match over the values returned by `fields`."""
    items = list(items)
    needle = (search or "").strip().lower()
    if not needle:
        return items
    return [item for item in items if any(v and needle in str(v).lower() for v in fields(item))]


def pagination_from_response(raw: Any, page: int, per_page: int) -> Pagination:
    """Read a backend pagination block (ours or Laravel's paginator) with safe defaults."""
    if not isinstance(raw, dict):
        return Pagination(current_page=page, per_page=per_page)
    total = int(raw.get("total") or 0)
    current = int(raw.get("current_page") or page)
    last = int(raw.get("last_page") or 1)
    return Pagination(
        current_page=current,
        last_page=max(last, 1),
        per_page=int(raw.get("per_page") or per_page),
        total=total,
        from_=raw.get("from"),
        to=raw.get("to"),
        has_more_pages=bool(raw.get("has_more_pages", current < last)),
    )
