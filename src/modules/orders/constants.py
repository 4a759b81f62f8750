"""Order domain constants."""

from django.db import models


class OrderStatus(models.TextChoices):
    WAITING_PAYMENT = "WAITING_PAYMENT", "Waiting payment"
    PAID = "PAID", "Paid"
    SHIPPED = "SHIPPED", "Shipped"
    DELIVERED = "DELIVERED", "Delivered"
    CANCELED = "CANCELED", "Canceled"


TERMINAL_STATES: set[str] = {OrderStatus.DELIVERED, OrderStatus.CANCELED}
