"""Index naming for the base index and its sort-order replicas."""

from __future__ import annotations

NEWEST_INDEX = "newest"
ACTIVE_INDEX = "active"
SCORE_INDEX = "score"

# Replica order is fixed: settings bootstrap and tests rely on it.
REPLICA_ORDERS: tuple[str, ...] = (NEWEST_INDEX, ACTIVE_INDEX, SCORE_INDEX)


def resolve_index_name(base: str, order: str = "") -> str:
    """Return the index serving ``order``.

    ``newest``, ``active`` and ``score`` map to ``<base>_<order>``; anything
    else (empty, ``relevance``, unknown) is the base index itself.
    """
    order = str(order)
    if order in REPLICA_ORDERS:
        return f"{base}_{order}"
    return base


def replica_index_names(base: str) -> list[str]:
    """Names of the three sort-order replicas of ``base``."""
    return [resolve_index_name(base, order) for order in REPLICA_ORDERS]
