"""Sorting and pagination over fully materialized collections.

The backing store returns entities unordered, so listings fetch everything
and order it in memory. Each entity kind exposes the fields it can be sorted
by as a mapping from field name to a key extractor; any other name is
rejected.
"""

from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar

from folio.config import PaginationSettings
from folio.domain.error import InvalidArgumentError

T = TypeVar("T")

SortKeys = Mapping[str, Callable[[Any], Any]]


class Paginator:
    """Field-name driven sort/paginate engine.

    Never mutates its input and never pushes ordering into the store.
    """

    def __init__(self, settings: PaginationSettings) -> None:
        """Initialize paginator.

        Args:
            settings: Default limit and sort field
        """
        self.settings = settings

    def list_page(
        self,
        items: Sequence[T],
        sort_keys: SortKeys,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
        desc: Optional[bool] = None,
    ) -> list[T]:
        """Sort a collection by a named field and return one page.

        Items are stable-sorted ascending by the field, the whole sequence is
        reversed when ``desc`` is set (so ties keep their ascending-pass
        order), then ``offset`` items are skipped and ``limit`` taken.

        Args:
            items: Full collection
            sort_keys: Recognized sort fields for this entity kind
            limit: Page size (default from settings)
            offset: Items to skip (default 0)
            sort: Sort field name (default from settings)
            desc: Reverse the sorted sequence (default False)

        Returns:
            The requested page

        Raises:
            InvalidArgumentError: If limit/offset is negative or the sort
                field is not recognized
        """
        limit, offset = self._resolve_window(limit, offset)
        sort = sort or self.settings.default_sort

        key = sort_keys.get(sort)
        if key is None:
            raise InvalidArgumentError(
                f"Unknown sort field '{sort}', expected one of: "
                + ", ".join(sorted(sort_keys))
            )

        ordered = sorted(items, key=key)
        if desc:
            ordered.reverse()
        return ordered[offset : offset + limit]

    def slice_page(
        self,
        items: Sequence[T],
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[T]:
        """Return one page of a collection in its given order.

        Raises:
            InvalidArgumentError: If limit or offset is negative
        """
        limit, offset = self._resolve_window(limit, offset)
        return list(items[offset : offset + limit])

    def _resolve_window(
        self, limit: Optional[int], offset: Optional[int]
    ) -> tuple[int, int]:
        if limit is None:
            limit = self.settings.default_limit
        if offset is None:
            offset = 0
        if limit < 0 or offset < 0:
            raise InvalidArgumentError(
                f"Limit or offset is incorrect: limit={limit}, offset={offset}"
            )
        return limit, offset
