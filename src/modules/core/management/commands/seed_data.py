from __future__ import annotations

import random
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.products.models import Product
from modules.users.models import Role, UserProfile


class Command(BaseCommand):
    help = "Seed database with a demo catalog and an admin/user pair."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        products = self._seed_products()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"products={len(products)}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        accounts = [
            ("admin", "admin123", Role.ADMIN),
            ("shopper", "shopper123", Role.USER),
        ]
        for username, password, role in accounts:
            user = User.objects.filter(username=username).first()
            if user is None:
                user = User.objects.create_user(username, password=password)
                created += 1
            UserProfile.objects.update_or_create(user=user, defaults={"role": role})
        return created

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        catalog = [
            ("Cordless Drill", "Tools", "Makita", Decimal("129.90")),
            ("Claw Hammer", "Tools", "Stanley", Decimal("24.50")),
            ("Socket Set", "Tools", "Bosch", Decimal("79.00")),
            ("Desk Lamp", "Home", "Philips", Decimal("39.90")),
            ("Throw Pillow", "Home", "Ikea", Decimal("14.99")),
            ("Wall Clock", "Home", "Seiko", Decimal("49.00")),
            ("Wireless Mouse", "Electronics", "Logitech", Decimal("29.99")),
            ("Mechanical Keyboard", "Electronics", "Keychron", Decimal("99.00")),
            ("USB-C Hub", "Electronics", "Anker", Decimal("45.50")),
            ("Running Shoes", "Sports", "Asics", Decimal("119.00")),
            ("Yoga Mat", "Sports", "Manduka", Decimal("59.00")),
            ("Water Bottle", "Sports", "Hydro Flask", Decimal("34.95")),
        ]
        for name, category, brand, price in catalog:
            product, _ = Product.objects.get_or_create(
                product_name=name,
                defaults={
                    "description": f"{brand} {name.lower()}",
                    "price": price,
                    "stock": random.randint(0, 50),
                    "brand": brand,
                    "category": category,
                },
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products
