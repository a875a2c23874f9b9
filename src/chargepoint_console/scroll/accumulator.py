"""Infinite scroll accumulation of backend pages."""

from collections.abc import Awaitable, Callable, Sequence

import httpx
from loguru import logger

from chargepoint_console.config import settings
from chargepoint_console.config.errors import ErrorNames
from chargepoint_console.search.schemas import (
    Page,
    SearchFilter,
    SearchParameters,
    SearchSort,
)
from chargepoint_console.search.service import search_elements

from .exceptions import ScrollStateError

__all__ = ["InfiniteScroll", "PageLoader", "has_more", "scroll_resource"]


type PageLoader[T] = Callable[[int, int], Awaitable[Page[T] | None]]


def has_more(total: int, page_size: int, page_index: int) -> bool:
    """Whether items remain past page ``page_index`` of a ``total`` item query."""
    return total > page_size * (page_index + 1)


class InfiniteScroll[T]:
    """Accumulate successive pages of one query into a growing list.

    Pages are requested strictly in increasing index order. A failed load
    keeps the accumulated state and sets ``error``, so the same page can be
    requested again. Issuing ``load_more`` while another load is pending is not
    supported.

    ``hasMore`` trusts the ``total`` of the latest page. When the backend
    reports a different ``total`` mid-run, ``total_drifted`` is set and the
    run carries on; items may then be duplicated or skipped at page
    boundaries.
    """

    def __init__(
        self,
        loader: PageLoader[T],
        page_size: int | None = None,
        error_message: str = ErrorNames.FETCH_LIST_FAILED,
    ) -> None:
        """Initialize an empty run.

        Args:
            loader: Coroutine function fetching ``(page_index, page_size)``.
            page_size: Page length, the configured default when omitted.
            error_message: Text exposed in ``error`` after a failed load.
        """
        self._loader = loader
        self.page_size = page_size or settings.page_size
        self.error_message = error_message
        self._generation = 0
        self._clear()

    def _clear(self) -> None:
        self.items: list[T] = []
        self.page_index = 0
        self.has_more = False
        self.total: int | None = None
        self.total_drifted = False
        self.error: str | None = None
        self._started = False

    async def load_initial(self) -> bool:
        """Fetch page 0 and seed the list with it.

        Returns:
            True if the page was applied.
        """
        page = await self._fetch(0)
        if page is None:
            return False

        self.items = list(page.data)
        self.page_index = 0
        self.total = page.total
        self.total_drifted = False
        self.has_more = has_more(page.total, self.page_size, 0)
        self.error = None
        self._started = True

        logger.debug(
            "Scroll seeded",
            items=len(self.items),
            total=page.total,
            has_more=self.has_more,
        )
        return True

    async def load_more(self) -> bool:
        """Fetch the next page and append it to the list.

        Does nothing once ``has_more`` is false.

        Returns:
            True if a page was appended.

        Raises:
            ScrollStateError: If no initial load succeeded in this run.
        """
        if not self._started:
            raise ScrollStateError()
        if not self.has_more:
            logger.debug("Scroll exhausted", page_index=self.page_index)
            return False

        next_index = self.page_index + 1
        page = await self._fetch(next_index)
        if page is None:
            return False

        if page.total != self.total:
            self.total_drifted = True
            logger.warning(
                "Total changed during scroll",
                previous=self.total,
                current=page.total,
                page_index=next_index,
            )

        self.items.extend(page.data)
        self.page_index = next_index
        self.total = page.total
        self.has_more = has_more(page.total, self.page_size, next_index)
        self.error = None

        logger.debug(
            "Scroll page appended",
            page_index=next_index,
            items=len(self.items),
            has_more=self.has_more,
        )
        return True

    def reset(self) -> None:
        """Start a new run. A load still pending is discarded when it lands."""
        self._generation += 1
        self._clear()

    async def _fetch(self, page_index: int) -> Page[T] | None:
        generation = self._generation
        page = await self._loader(page_index, self.page_size)

        if generation != self._generation:
            logger.debug("Discarding page of a reset run", page_index=page_index)
            return None

        if page is None:
            self.error = self.error_message
            logger.warning("Scroll page load failed", page_index=page_index)
        return page


def scroll_resource[T](
    client: httpx.AsyncClient,
    path: str,
    item_type: type[T],
    page_size: int | None = None,
    filters: Sequence[SearchFilter] = (),
    sort: SearchSort | None = None,
) -> InfiniteScroll[T]:
    """Build an ``InfiniteScroll`` over a backend search endpoint.

    Args:
        client: Backend client.
        path: Search endpoint, e.g. ``/api/chargepoint/search``.
        item_type: Type of the page items.
        page_size: Page length, the configured default when omitted.
        filters: Filters applied to every page.
        sort: Sort applied to every page.

    Returns:
        A run ready for ``load_initial``.
    """

    async def load(page_index: int, size: int) -> Page[T] | None:
        params = SearchParameters(
            size=size, page=page_index, filters=tuple(filters), sort=sort
        )
        return await search_elements(client, path, item_type, params)

    return InfiniteScroll(load, page_size)
