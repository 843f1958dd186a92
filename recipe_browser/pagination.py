import math
from dataclasses import dataclass
from typing import Optional

from . import config

# OFFSET must fit a signed 64-bit integer
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _to_int(value, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def normalize_page_request(page=None, limit=None) -> PageRequest:
    """Clamp raw ``page``/``limit`` values into a valid request.

    Missing or non-integer values fall back to the defaults; ``page`` is at
    least 1 and ``limit`` is kept within ``[1, MAX_LIMIT]``. ``page`` is also
    capped so the offset never exceeds ``MAX_OFFSET``.
    """
    lim = min(config.MAX_LIMIT, max(1, _to_int(limit, config.DEFAULT_LIMIT)))
    p = max(1, _to_int(page, config.DEFAULT_PAGE))
    p = min(p, MAX_OFFSET // lim + 1)
    return PageRequest(page=p, limit=lim)


def total_pages(total: int, limit: int) -> int:
    return max(1, math.ceil(total / limit))


def link_header(url, page_request: PageRequest, total: int) -> Optional[str]:
    """Build an RFC 5988 ``Link`` header with prev/next page URLs.

    ``url`` is a Starlette ``URL``; returns None when there is no other page.
    """
    links = []
    last = total_pages(total, page_request.limit)
    if page_request.page > 1:
        prev_page = min(page_request.page - 1, last)
        prev_url = url.include_query_params(page=prev_page, limit=page_request.limit)
        links.append(f'<{prev_url}>; rel="prev"')
    if page_request.page < last:
        next_url = url.include_query_params(
            page=page_request.page + 1, limit=page_request.limit
        )
        links.append(f'<{next_url}>; rel="next"')
    return ", ".join(links) if links else None
