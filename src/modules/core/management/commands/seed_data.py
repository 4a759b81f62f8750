from __future__ import annotations

from datetime import date, datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand
from django.db import transaction

from modules.orders.constants import OrderStatus
from modules.orders.models import Order, OrderItem, Payment
from modules.products.models import Category, Product
from modules.users.models import User

LOREM = "Lorem ipsum dolor sit amet, consectetur adipiscing elit."

CATEGORIES = ["Livros", "Eletrônicos", "Computadores"]

# name, price, img_url, categories
CATALOG = [
    ("The Lord of the Rings", Decimal("90.50"), "1-big.jpg", ["Livros"]),
    ("Smart TV", Decimal("2190.00"), "2-big.jpg", ["Eletrônicos", "Computadores"]),
    ("Macbook Pro", Decimal("1250.00"), "3-big.jpg", ["Computadores"]),
    ("PC Gamer", Decimal("1200.00"), "4-big.jpg", ["Computadores"]),
    ("Rails for Dummies", Decimal("100.99"), "5-big.jpg", ["Livros"]),
    ("PC Gamer Ex", Decimal("1350.00"), "6-big.jpg", ["Computadores"]),
    ("PC Gamer X", Decimal("1350.00"), "7-big.jpg", ["Computadores"]),
]

# name, email, phone, birth_date, raw password
USERS = [
    ("Maria Brown", "maria@gmail.com", "988888888", date(2001, 7, 25), "123456"),
    ("Alex Green", "alex@gmail.com", "977777777", date(1987, 12, 13), "123456"),
]

# client email, moment, status, [(product name, quantity)], paid
ORDERS = [
    (
        "maria@gmail.com",
        datetime(2022, 7, 25, 13, 0, tzinfo=dt_timezone.utc),
        OrderStatus.PAID,
        [("The Lord of the Rings", 2), ("Macbook Pro", 1)],
        True,
    ),
    (
        "alex@gmail.com",
        datetime(2022, 7, 29, 15, 50, tzinfo=dt_timezone.utc),
        OrderStatus.WAITING_PAYMENT,
        [("Smart TV", 1)],
        False,
    ),
    (
        "maria@gmail.com",
        datetime(2022, 8, 3, 14, 20, tzinfo=dt_timezone.utc),
        OrderStatus.WAITING_PAYMENT,
        [("PC Gamer Ex", 2)],
        False,
    ),
]


class Command(BaseCommand):
    help = "Seed database with a small catalogue, users and orders."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        categories = self._seed_categories()
        products = self._seed_products(categories)
        users = self._seed_users()
        orders_created = self._seed_orders(users, products)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={len(categories)}, "
                f"products={len(products)}, "
                f"users={len(users)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_categories(self) -> dict[str, Category]:
        categories = {}
        for name in CATEGORIES:
            categories[name], _ = Category.objects.get_or_create(name=name)
        return categories

    def _seed_products(self, categories: dict[str, Category]) -> dict[str, Product]:
        self.stdout.write("Creating products...")
        products: dict[str, Product] = {}
        for name, price, img_url, category_names in CATALOG:
            product, created = Product.objects.get_or_create(
                name=name,
                defaults={"description": LOREM, "price": price, "img_url": img_url},
            )
            if created:
                product.categories.set(categories[c] for c in category_names)
            products[name] = product
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_users(self) -> dict[str, User]:
        users: dict[str, User] = {}
        for name, email, phone, birth_date, password in USERS:
            user, _ = User.objects.get_or_create(
                email=email,
                defaults={
                    "name": name,
                    "phone": phone,
                    "birth_date": birth_date,
                    "password": make_password(password),
                },
            )
            users[email] = user
        return users

    def _seed_orders(self, users: dict[str, User], products: dict[str, Product]) -> int:
        self.stdout.write("Creating orders...")
        orders_created = 0
        for email, moment, status, lines, paid in ORDERS:
            order, created = Order.objects.get_or_create(
                client=users[email],
                moment=moment,
                defaults={"status": status},
            )
            if not created:
                continue

            for product_name, quantity in lines:
                OrderItem.objects.create(
                    order=order,
                    product=products[product_name],
                    quantity=quantity,
                )
            if paid:
                Payment.objects.create(order=order, moment=moment + timedelta(hours=2))
            orders_created += 1

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return orders_created
