"""
Identifier assignment.

Ids are monotonic per collection: a new id is greater than every id currently
present and every id issued before, so ids freed by deletion are never reused.
"""

from typing import Iterable


def next_id(existing_ids: Iterable[int], last_issued: int = 0) -> int:
    """
    Compute the next id for a collection.

    Args:
        existing_ids: Ids of the items currently in the collection
        last_issued: Highest id ever handed out for the collection

    Returns:
        An id strictly greater than all existing ids and ``last_issued``
    """
    return max(max(existing_ids, default=0), last_issued) + 1


# Largest value a relational INTEGER primary key can hold
MAX_ID = 2**63 - 1


def is_storable_id(value: int) -> bool:
    """Whether ``value`` can name a stored list or todo."""
    return 1 <= value <= MAX_ID
