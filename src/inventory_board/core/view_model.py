"""View model that partitions, orders and annotates items for display.

Every function here is pure: it reads an item snapshot and returns new
lists and projections. Malformed numeric fields never raise, they resolve
toward "use the default threshold" and "not low stock".
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import cmp_to_key

import structlog

from inventory_board.config import DEFAULT_LOW_STOCK_THRESHOLD, get_settings
from inventory_board.core.models import Item, ItemType, ItemView, LocationSummary

logger = structlog.get_logger()


def resolve_threshold(
    item: Item, default: int | float = DEFAULT_LOW_STOCK_THRESHOLD
) -> int | float:
    """Get the threshold that applies to an item.

    The item's own threshold wins when it is a finite number above zero.
    Missing, zero, negative and non-finite thresholds fall back to the default.
    """
    threshold = item.low_stock_threshold
    if threshold is None or threshold <= 0:
        return default
    if isinstance(threshold, float) and not math.isfinite(threshold):
        return default
    return threshold


def is_low_stock(item: Item, default: int | float = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
    """Check if a Supplies item has fallen below its threshold.

    Equipment is never low stock. An unknown amount is never low stock.
    """
    if item.type is not ItemType.SUPPLIES:
        return False
    if item.amount is None:
        return False
    return item.amount < resolve_threshold(item, default)


def _compare_for_display(
    a: Item, b: Item, default: int | float
) -> int:
    a_low = is_low_stock(a, default)
    b_low = is_low_stock(b, default)
    if a_low and not b_low:
        return -1
    if b_low and not a_low:
        return 1

    a_rank = 0 if a.type is ItemType.SUPPLIES else 1
    b_rank = 0 if b.type is ItemType.SUPPLIES else 1
    return a_rank - b_rank


def order_for_display(
    items: Iterable[Item], default: int | float = DEFAULT_LOW_STOCK_THRESHOLD
) -> list[Item]:
    """Order items as they appear in a location list.

    Low-stock items come first, then Supplies before Equipment. Ties keep
    their input order, which gives: low-stock Supplies, other Supplies,
    Equipment.
    """
    key = cmp_to_key(lambda a, b: _compare_for_display(a, b, default))
    return sorted(items, key=key)


def annotate(item: Item, default: int | float = DEFAULT_LOW_STOCK_THRESHOLD) -> ItemView:
    """Project an item into its display view."""
    return ItemView(
        item=item,
        low_stock=is_low_stock(item, default),
        effective_threshold=resolve_threshold(item, default),
        type_label=item.type.label,
    )


def partition_by_location(
    items: Iterable[Item], locations: Sequence[str]
) -> dict[str, list[Item]]:
    """Split items into one bucket per recognized location.

    Buckets keep input order. Items whose location is not recognized are
    left out of every bucket.
    """
    buckets: dict[str, list[Item]] = {location: [] for location in locations}
    dropped = 0
    for item in items:
        bucket = buckets.get(item.location)
        if bucket is None:
            dropped += 1
            continue
        bucket.append(item)

    if dropped:
        logger.debug("items_outside_locations", dropped=dropped, locations=list(buckets))

    return buckets


def summarize(
    items: Iterable[Item],
    locations: Sequence[str],
    default: int | float = DEFAULT_LOW_STOCK_THRESHOLD,
) -> list[LocationSummary]:
    """Count items and low-stock items per recognized location."""
    buckets = partition_by_location(items, locations)
    return [
        LocationSummary(
            location=location,
            total=len(bucket),
            low_stock=sum(1 for item in bucket if is_low_stock(item, default)),
        )
        for location, bucket in buckets.items()
    ]


class InventoryViewModel:
    """Display logic bound to the configured locations and default threshold."""

    def __init__(
        self,
        locations: Sequence[str] | None = None,
        default_threshold: int | float | None = None,
    ):
        """Initialize view model.

        Args:
            locations: Recognized location ids in display order. If None, uses settings.
            default_threshold: Global low-stock threshold. If None, uses settings.

        Raises:
            ValueError: If default_threshold is not positive
        """
        if locations is None or default_threshold is None:
            board = get_settings().board
            if locations is None:
                locations = board.location_ids
            if default_threshold is None:
                default_threshold = board.default_low_stock_threshold
        if default_threshold <= 0:
            raise ValueError(f"default_threshold must be positive, got: {default_threshold}")
        self.locations: tuple[str, ...] = tuple(locations)
        self.default_threshold = default_threshold

    def resolve_threshold(self, item: Item) -> int | float:
        return resolve_threshold(item, self.default_threshold)

    def is_low_stock(self, item: Item) -> bool:
        return is_low_stock(item, self.default_threshold)

    def order_for_display(self, items: Iterable[Item]) -> list[Item]:
        return order_for_display(items, self.default_threshold)

    def annotate(self, item: Item) -> ItemView:
        return annotate(item, self.default_threshold)

    def partition_by_location(self, items: Iterable[Item]) -> dict[str, list[Item]]:
        return partition_by_location(items, self.locations)

    def summarize(self, items: Iterable[Item]) -> list[LocationSummary]:
        return summarize(items, self.locations, self.default_threshold)

    def location_view(self, items: Iterable[Item], location: str) -> list[ItemView]:
        """Build the ordered, annotated list for one location.

        Args:
            items: Full item snapshot
            location: Location id to show

        Returns:
            Item views in display order, empty for an unrecognized location
        """
        if location not in self.locations:
            logger.debug("unknown_location_requested", location=location)
            return []
        scoped = [item for item in items if item.location == location]
        return [self.annotate(item) for item in self.order_for_display(scoped)]

    def board(self, items: Iterable[Item]) -> dict[str, list[ItemView]]:
        """Build the ordered, annotated list for every recognized location."""
        buckets = self.partition_by_location(items)
        board = {
            location: [self.annotate(item) for item in self.order_for_display(bucket)]
            for location, bucket in buckets.items()
        }
        logger.debug(
            "board_built",
            locations=len(board),
            items=sum(len(views) for views in board.values()),
        )
        return board


# Global view model instance
_view_model: InventoryViewModel | None = None


def get_view_model() -> InventoryViewModel:
    """Get the global view model built from settings."""
    global _view_model
    if _view_model is None:
        _view_model = InventoryViewModel()
    return _view_model
