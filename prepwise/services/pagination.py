from typing import List, Tuple

from sqlalchemy.orm import Query


def fetch_page(query: Query, order_by, limit: int, skip: int, *options) -> Tuple[List, int]:
    """Return one page of ``query`` plus the count of every matching row.

    The page and the count are two separate reads and are not guaranteed to
    observe the same snapshot.
    """
    items = (
        query.options(*options)
        .order_by(order_by)
        .offset(skip)
        .limit(limit)
        .all()
    )
    total = query.count()
    return items, total
