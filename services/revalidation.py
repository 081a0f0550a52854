"""
services/revalidation.py
------------------------
Post-commit page revalidation.

Repositories call `revalidate_paths()` after a write has been committed,
naming the logical pages that render the changed data. Each subscribed
listener (the bot's page cache, a webhook to the public site, ...) is told
about every path. Invalidating twice is harmless, and a failing listener
never fails the write that triggered it.
"""

from typing import Callable, Iterable

from utils.logger import get_logger

logger = get_logger(__name__)

Listener = Callable[[str], None]

# ── Pages per entity ──────────────────────────────────────
PROJECT_PAGES: tuple[str, ...] = ("/projects", "/projects/[slug]", "/", "/admin")
ABOUT_PAGES: tuple[str, ...] = ("/about", "/", "/admin")
CONTACT_PAGES: tuple[str, ...] = ("/contact", "/", "/admin")

_listeners: list[Listener] = []


def subscribe(listener: Listener) -> None:
    """Register a listener; registering the same one twice is a no-op."""
    if listener not in _listeners:
        _listeners.append(listener)


def unsubscribe(listener: Listener) -> None:
    """Remove a listener if it is registered."""
    if listener in _listeners:
        _listeners.remove(listener)


def revalidate_paths(paths: Iterable[str]) -> None:
    """
    Notify every listener that the given page paths are stale.

    Never raises: listener errors are logged and the remaining
    listeners and paths are still notified. No retries.

    Args:
        paths: Logical page paths or route patterns such as
            '/projects/[slug]'.
    """
    for path in paths:
        for listener in list(_listeners):
            try:
                listener(path)
            except Exception as e:
                logger.error(f"Revalidation of {path} failed in {listener!r}: {e}")
        logger.debug(f"Revalidated {path}")
