# src/storage/seed_data.py

"""Built-in sample data used when a store finds nothing persisted."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from src.models.product import Product, Seller, Specification
from src.models.purchase import Purchase

_JOHN = Seller(
    name="johndoe",
    rating=4.8,
    joined_at="2023-01-15",
    location="Mumbai",
    total_sales=24,
)
_JANE = Seller(
    name="janedoe",
    rating=4.6,
    joined_at="2023-03-02",
    location="Bengaluru",
    total_sales=11,
)
_BOB = Seller(
    name="bobsmith",
    rating=4.2,
    joined_at="2023-06-20",
    location="Pune",
    total_sales=7,
)


def _days_ago(now: datetime, days: int) -> datetime:
    return now - timedelta(days=days)


def sample_products(now: datetime | None = None) -> list[Product]:
    """Return the demo catalog, timestamped relative to *now*."""
    now = now or datetime.now(timezone.utc)
    return [
        Product(
            id="1",
            title="Vintage Leather Jacket",
            description="Genuine leather jacket in excellent condition. Worn only a few times.",
            category="Clothing",
            sub_category="Men",
            price=Decimal("89.99"),
            image="/placeholder.svg?height=300&width=300",
            specifications=(
                Specification("Size", "M"),
                Specification("Material", "Leather"),
            ),
            condition="Like New",
            seller=_JOHN,
            seller_id="1",
            created_at=_days_ago(now, 7),
            featured=True,
        ),
        Product(
            id="2",
            title="Mechanical Keyboard",
            description="Mechanical keyboard with Cherry MX Brown switches. Great for typing and gaming.",
            category="Electronics",
            sub_category="Accessories",
            price=Decimal("45.50"),
            image="/placeholder.svg?height=300&width=300",
            specifications=(
                Specification("Switches", "Cherry MX Brown"),
                Specification("Layout", "TKL"),
            ),
            condition="Good",
            seller=_JOHN,
            seller_id="1",
            created_at=_days_ago(now, 14),
        ),
        Product(
            id="3",
            title="Vintage Record Player",
            description="Fully functional record player from the 70s. Great sound quality.",
            category="Electronics",
            sub_category="Audio",
            price=Decimal("120.00"),
            image="/placeholder.svg?height=300&width=300",
            specifications=(Specification("Speeds", "33/45 RPM"),),
            condition="Good",
            seller=_JANE,
            seller_id="2",
            created_at=_days_ago(now, 21),
            featured=True,
        ),
        Product(
            id="4",
            title="Mountain Bike",
            description="Lightly used mountain bike. 21 speeds, disc brakes.",
            category="Sports",
            sub_category="Cycling",
            price=Decimal("210.00"),
            image="/placeholder.svg?height=300&width=300",
            specifications=(
                Specification("Gears", "21"),
                Specification("Brakes", "Disc"),
            ),
            condition="Fair",
            seller=_JANE,
            seller_id="2",
            created_at=_days_ago(now, 30),
            featured=True,
        ),
        Product(
            id="5",
            title="Antique Wooden Chair",
            description="Beautiful wooden chair from the early 1900s. Some wear but in good condition.",
            category="Home & Garden",
            sub_category="Furniture",
            price=Decimal("75.00"),
            image="/placeholder.svg?height=300&width=300",
            condition="Fair",
            seller=_BOB,
            seller_id="3",
            created_at=_days_ago(now, 45),
        ),
        Product(
            id="6",
            title="Handmade Ceramic Vase",
            description="Unique handmade ceramic vase. Perfect for fresh or dried flowers.",
            category="Home & Garden",
            sub_category="Decor",
            price=Decimal("35.00"),
            image="/placeholder.svg?height=300&width=300",
            condition="New",
            seller=_BOB,
            seller_id="3",
            created_at=_days_ago(now, 60),
            featured=True,
        ),
    ]


def sample_purchases(now: datetime | None = None) -> list[Purchase]:
    """Return the demo purchase history of account ``"1"``."""
    now = now or datetime.now(timezone.utc)
    return [
        Purchase(
            id="1",
            user_id="1",
            product_id="3",
            purchased_at=_days_ago(now, 5),
            price=Decimal("120.00"),
        ),
        Purchase(
            id="2",
            user_id="1",
            product_id="5",
            purchased_at=_days_ago(now, 15),
            price=Decimal("75.00"),
        ),
    ]
