"""Django ORM implementation of the Order repository."""

from __future__ import annotations

from django.db import models

from modules.core.repositories.django_repository import DjangoRepository
from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository


class OrderDjangoRepository(DjangoRepository[Order], IOrderRepository):
    """Concrete Order repository backed by Django ORM.

    ``select_related`` covers the client and the payment (single JOIN);
    ``prefetch_related`` batches items and their products.  Prevents N+1.
    """

    model = Order

    def get_queryset(self) -> models.QuerySet:
        return Order.objects.select_related("client", "payment").prefetch_related(
            "items__product"
        )
