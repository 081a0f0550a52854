"""
services/page_cache.py
----------------------
In-process cache of rendered pages keyed by logical path.
"""

from typing import Callable

from utils.logger import get_logger

logger = get_logger(__name__)


def _matches(pattern: str, path: str) -> bool:
    """True if `path` matches `pattern`, where a `[param]` segment matches any one segment."""
    if pattern == path:
        return True
    pattern_parts = pattern.strip("/").split("/")
    path_parts = path.strip("/").split("/")
    if len(pattern_parts) != len(path_parts):
        return False
    for expected, actual in zip(pattern_parts, path_parts):
        if expected.startswith("[") and expected.endswith("]"):
            continue
        if expected != actual:
            return False
    return True


class PageCache:
    """Rendered output per page path; dropped on revalidation."""

    def __init__(self):
        self._pages: dict[str, str] = {}

    def get(self, path: str) -> str | None:
        return self._pages.get(path)

    def get_or_render(self, path: str, render: Callable[[], str]) -> str:
        """Return the cached page for `path`, rendering and storing it on a miss."""
        page = self._pages.get(path)
        if page is None:
            page = render()
            self._pages[path] = page
        return page

    def invalidate(self, path: str) -> int:
        """
        Drop every cached page matching `path` (exact path or route pattern).

        Returns:
            Number of pages dropped.
        """
        stale = [cached for cached in self._pages if _matches(path, cached)]
        for cached in stale:
            del self._pages[cached]
        if stale:
            logger.debug(f"Dropped {len(stale)} cached page(s) for {path}")
        return len(stale)

    def clear(self) -> None:
        self._pages.clear()

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, path: str) -> bool:
        return path in self._pages


page_cache = PageCache()
