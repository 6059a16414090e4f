from typing import Dict, Iterable, List, Tuple
from urllib.parse import urlencode

from app.schemas.pagination import Page

PAGE_PARAMS = ("page", "size")


def _page_link(base_url: str, preserved: List[Tuple[str, str]], page: int, size: int, rel: str) -> str:
    query = urlencode(preserved + [("page", page), ("size", size)], safe=",")
    return f'<{base_url}?{query}>; rel="{rel}"'


def generate_pagination_headers(
    page: Page,
    base_url: str,
    query_params: Iterable[Tuple[str, str]] = ()
) -> Dict[str, str]:
    """
    X-Total-Count и Link (RFC 5988) для страницы результата.
    Параметры запроса, кроме page/size, переносятся в ссылки как есть.
    """
    preserved = [(key, value) for key, value in query_params if key not in PAGE_PARAMS]
    last_page = max(page.total_pages - 1, 0)

    links = [_page_link(base_url, preserved, 0, page.size, "first")]
    if page.page > 0:
        links.append(_page_link(base_url, preserved, page.page - 1, page.size, "prev"))
    if page.page < last_page:
        links.append(_page_link(base_url, preserved, page.page + 1, page.size, "next"))
    links.append(_page_link(base_url, preserved, last_page, page.size, "last"))

    return {
        "X-Total-Count": str(page.total),
        "Link": ", ".join(links),
    }
