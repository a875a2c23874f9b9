"""Scroll module: incremental loading of paginated lists."""

from .accumulator import InfiniteScroll, PageLoader, has_more, scroll_resource
from .exceptions import ScrollStateError

__all__ = [
    "InfiniteScroll",
    "PageLoader",
    "ScrollStateError",
    "has_more",
    "scroll_resource",
]
