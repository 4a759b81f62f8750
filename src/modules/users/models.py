"""User (shop client) model.

Not Django's auth user: this is the customer that places orders.  The
``password`` column is opaque to the application; it is never exposed by
the API and is stored already hashed (see the ``seed_data`` command).

A user's orders are reached through the ``orders`` reverse relation of
``Order.client``.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import IdentityModel


class User(IdentityModel):
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)
    phone = models.CharField(max_length=20, blank=True, default="")
    birth_date = models.DateField(null=True, blank=True)
    password = models.CharField(max_length=128)

    class Meta:
        db_table = "users"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
