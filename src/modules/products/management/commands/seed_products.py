from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = [
    ("Laptop", "High performance laptop", Decimal("15000.00"), 10),
    ("Mouse", "Wireless mouse", Decimal("250.00"), 50),
    ("Keyboard", "Mechanical keyboard", Decimal("500.00"), 25),
]


class Command(BaseCommand):
    help = "Seed the catalog with demo products."

    def handle(self, *args, **options):
        self.stdout.write("Creating products...")
        created = 0
        for name, description, price, stock in CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "description": description,
                    "price": price,
                    "stock": stock,
                },
            )
            created += int(was_created)
        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: products={created}")
        )
