from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = [
    ("Keyboard", Decimal("49.90")),
    ("Mouse", Decimal("19.90")),
    ("Monitor 27\"", Decimal("299.00")),
    ("USB-C Hub", Decimal("39.50")),
    ("Webcam", Decimal("59.00")),
    ("Headset", Decimal("79.90")),
    ("Laptop Stand", Decimal("34.00")),
    ("Desk Lamp", Decimal("24.90")),
]


class Command(BaseCommand):
    help = "Seed the catalog with demo products (idempotent by name)."

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        created = 0
        for name, price in CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price},
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: created={created}, "
                f"available={Product.objects.available().count()}"
            )
        )
