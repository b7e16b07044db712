#!/usr/bin/env python3
"""
Seed the configured record store with sample data.

Writes the fixed menu, floor plan and customers, then generates a batch of
random orders spread over the last week with Faker.

Usage: python scripts/seed_sample_data.py [ORDER_COUNT]
"""

import asyncio
import random
import sys
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List

# Make the project root importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from faker import Faker  # noqa: E402

from src.container import Container  # noqa: E402
from src.domain.entities.order_entity import OrderStatus, OrderType  # noqa: E402
from src.domain.entities.record_fields import format_datetime, utc_now  # noqa: E402
from src.domain.repositories.record_store import Collection  # noqa: E402
from src.domain.value_objects.order_number import OrderNumber  # noqa: E402
from src.infrastructure.repositories.sample_data import (  # noqa: E402
    SAMPLE_CATEGORIES,
    SAMPLE_CUSTOMERS,
    SAMPLE_MENU_ITEMS,
    SAMPLE_TABLES,
)

fake = Faker("en_US")

DEFAULT_ORDER_COUNT = 40
SEATS = [f"Table {n}" for n in range(1, 11)] + [f"Bar Seat {n}" for n in range(1, 5)]


def generate_order_data(order_index: int) -> Dict[str, Any]:
    """Generate a realistic order record"""
    created = utc_now() - timedelta(minutes=random.randint(1, 7 * 24 * 60))
    status = random.choices(
        list(OrderStatus), weights=[0.15, 0.15, 0.1, 0.6]
    )[0]

    lines: List[Dict[str, Any]] = []
    for item in random.sample(SAMPLE_MENU_ITEMS, k=random.randint(1, 4)):
        lines.append(
            {
                "id": len(lines) + 1,
                "menu_item_id": item["id"],
                "menu_item_name": item["name"],
                "quantity": random.choices([1, 2, 3], weights=[0.7, 0.2, 0.1])[0],
                "price": item["price"],
                "special_requests": "",
            }
        )

    number = OrderNumber.from_timestamp(created + timedelta(milliseconds=order_index))
    return {
        "order_number": number.value,
        "customer_name": fake.name(),
        "table_number": random.choice(SEATS),
        "order_type": random.choices(list(OrderType), weights=[0.7, 0.2, 0.1])[0].value,
        "status": status.value,
        "items": lines,
        "special_requests": fake.sentence(nb_words=5) if random.random() < 0.2 else "",
        "total_amount": round(sum(l["price"] * l["quantity"] for l in lines), 2),
        "customer_id": None,
        "created_at": format_datetime(created),
        "updated_at": format_datetime(created),
    }


async def seed(order_count: int) -> None:
    container = Container()
    store = container.record_store
    try:
        existing = await store.list(Collection.CATEGORY)
        if existing:
            print(f"⚠️  Store already contains {len(existing)} categories, skipping fixed data")
        else:
            for collection, records in (
                (Collection.CATEGORY, SAMPLE_CATEGORIES),
                (Collection.MENU_ITEM, SAMPLE_MENU_ITEMS),
                (Collection.TABLE, SAMPLE_TABLES),
                (Collection.CUSTOMER, SAMPLE_CUSTOMERS),
            ):
                for record in records:
                    await store.create(
                        collection, {k: v for k, v in record.items() if k != "id"}
                    )
                print(f"  ✅ {collection.value}: {len(records)} records")

        for index in range(order_count):
            await store.create(Collection.ORDER, generate_order_data(index))
        print(f"  ✅ order: {order_count} records")
    finally:
        await container.aclose()


def main():
    order_count = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_ORDER_COUNT
    print("🚀 Seeding sample data...")
    asyncio.run(seed(order_count))
    print("🎉 Done")


if __name__ == "__main__":
    main()
