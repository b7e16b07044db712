"""
Sample records used to seed a fresh store for demos and local development
"""

from datetime import datetime, timedelta
from typing import Dict, List, Optional

from src.domain.entities.record_fields import format_datetime, utc_now
from src.domain.repositories.record_store import Collection, Record

SAMPLE_CATEGORIES: List[Record] = [
    {"id": 1, "name": "Appetizers", "display_order": 1, "item_count": 3, "is_active": True},
    {"id": 2, "name": "Main Courses", "display_order": 2, "item_count": 3, "is_active": True},
    {"id": 3, "name": "Desserts", "display_order": 3, "item_count": 2, "is_active": True},
    {"id": 4, "name": "Beverages", "display_order": 4, "item_count": 2, "is_active": True},
]

SAMPLE_MENU_ITEMS: List[Record] = [
    {"id": 1, "name": "Bruschetta", "price": 8.5, "category_id": 1,
     "description": "Grilled bread, tomato, basil and garlic", "is_available": True},
    {"id": 2, "name": "Calamari", "price": 11.0, "category_id": 1,
     "description": "Crispy squid with lemon aioli", "is_available": True},
    {"id": 3, "name": "Soup of the Day", "price": 6.75, "category_id": 1,
     "description": "Ask your server", "is_available": False},
    {"id": 4, "name": "Grilled Salmon", "price": 24.0, "category_id": 2,
     "description": "Atlantic salmon, seasonal vegetables", "is_available": True},
    {"id": 5, "name": "Ribeye Steak", "price": 32.0, "category_id": 2,
     "description": "12oz ribeye with herb butter", "is_available": True},
    {"id": 6, "name": "Mushroom Risotto", "price": 18.5, "category_id": 2,
     "description": "Arborio rice, wild mushrooms, parmesan", "is_available": True},
    {"id": 7, "name": "Tiramisu", "price": 12.5, "category_id": 3,
     "description": "Espresso-soaked ladyfingers, mascarpone", "is_available": True},
    {"id": 8, "name": "Cheesecake", "price": 9.0, "category_id": 3,
     "description": "New York style with berry compote", "is_available": True},
    {"id": 9, "name": "Lemonade", "price": 4.0, "category_id": 4,
     "description": "Freshly squeezed", "is_available": True},
    {"id": 10, "name": "Espresso", "price": 3.5, "category_id": 4,
     "description": "Double shot", "is_available": True},
]

SAMPLE_TABLES: List[Record] = [
    {"id": 1, "number": 1, "seats": 2, "status": "available", "server": None,
     "x": 100, "y": 100, "shape": "round"},
    {"id": 2, "number": 2, "seats": 4, "status": "occupied", "server": "Alice",
     "x": 250, "y": 100, "shape": "square"},
    {"id": 3, "number": 3, "seats": 6, "status": "reserved", "server": "Bob",
     "x": 400, "y": 100, "shape": "rectangle"},
    {"id": 4, "number": 4, "seats": 2, "status": "cleaning", "server": None,
     "x": 100, "y": 250, "shape": "round"},
    {"id": 5, "number": 5, "seats": 4, "status": "available", "server": None,
     "x": 250, "y": 250, "shape": "square"},
    {"id": 6, "number": 6, "seats": 8, "status": "occupied", "server": "Carol",
     "x": 400, "y": 250, "shape": "rectangle"},
]

SAMPLE_CUSTOMERS: List[Record] = [
    {"id": 1, "name": "Ana Lopez", "email": "ana@example.com", "phone": "555-0101"},
    {"id": 2, "name": "Ben Carter", "email": "ben@example.com", "phone": "555-0102"},
    {"id": 3, "name": "Chloe Kim", "email": "chloe@example.com", "phone": "555-0103"},
]


def _line(line_id: int, item: Record, quantity: int = 1) -> Record:
    return {
        "id": line_id,
        "menu_item_id": item["id"],
        "menu_item_name": item["name"],
        "quantity": quantity,
        "price": item["price"],
        "special_requests": "",
    }


def sample_orders(now: Optional[datetime] = None) -> List[Record]:
    """A handful of orders spread over the board columns"""
    now = now or utc_now()
    items = {item["id"]: item for item in SAMPLE_MENU_ITEMS}
    specs = [
        (1, "Ana Lopez", "Table 5", "received", [(_line(1, items[7]))], 4, 1),
        (2, "Ben Carter", "Table 2", "preparing",
         [_line(1, items[4]), _line(2, items[9], 2)], 12, 2),
        (3, "Walk-in", "Bar Seat 1", "ready", [_line(1, items[10], 2)], 20, None),
        (4, "Chloe Kim", "Patio Table 1", "served",
         [_line(1, items[5]), _line(2, items[1])], 55, 3),
    ]

    orders = []
    for order_id, customer, table, status, lines, minutes_ago, customer_id in specs:
        created = now - timedelta(minutes=minutes_ago)
        orders.append(
            {
                "id": order_id,
                "order_number": f"ORD-{100000 + order_id * 1111:06d}",
                "customer_name": customer,
                "table_number": table,
                "order_type": "dine-in",
                "status": status,
                "items": lines,
                "special_requests": "",
                "total_amount": round(sum(l["price"] * l["quantity"] for l in lines), 2),
                "customer_id": customer_id,
                "created_at": format_datetime(created),
                "updated_at": format_datetime(created),
            }
        )
    return orders


def sample_records(now: Optional[datetime] = None) -> Dict[Collection, List[Record]]:
    return {
        Collection.CATEGORY: SAMPLE_CATEGORIES,
        Collection.MENU_ITEM: SAMPLE_MENU_ITEMS,
        Collection.TABLE: SAMPLE_TABLES,
        Collection.CUSTOMER: SAMPLE_CUSTOMERS,
        Collection.ORDER: sample_orders(now),
    }
