"""Order repository interface.

The Order aggregate is read-only through the API; the generic contract
from ``IRepository`` covers it.  ``find_by_id`` is expected to load the
client, the items with their products and the payment in a bounded
number of queries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""
