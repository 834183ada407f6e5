# src/models/product.py

"""Product listing model and the seller snapshot embedded in it."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any


def parse_timestamp(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting the JavaScript ``Z`` suffix."""
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    return datetime.fromisoformat(raw)


@dataclass(frozen=True)
class Specification:
    """A free-form name/value pair shown on the listing page."""

    name: str
    value: str


@dataclass(frozen=True)
class Seller:
    """Seller profile copied onto a listing when it is created.

    This is a value snapshot: later profile changes are not propagated
    to listings that already carry it.
    """

    name: str
    rating: float = 0.0
    joined_at: str = ""
    location: str = ""
    total_sales: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Seller":
        return cls(
            name=data.get("name", ""),
            rating=float(data.get("rating", 0.0)),
            joined_at=data.get("joined_at", ""),
            location=data.get("location", ""),
            total_sales=int(data.get("total_sales", 0)),
        )


@dataclass(frozen=True)
class ProductDraft:
    """Everything a seller supplies for a new listing.

    The store assigns ``id`` and ``created_at`` when the draft is added.
    """

    title: str
    description: str
    category: str
    price: Decimal
    seller_id: str
    seller: Seller
    image: str = ""
    sub_category: str | None = None
    condition: str = ""
    specifications: tuple[Specification, ...] = ()
    featured: bool = False


@dataclass(frozen=True)
class Product:
    """A single marketplace listing."""

    id: str
    title: str
    description: str
    category: str
    price: Decimal
    seller_id: str
    seller: Seller
    created_at: datetime
    image: str = ""
    sub_category: str | None = None
    condition: str = ""
    specifications: tuple[Specification, ...] = field(default=())
    featured: bool = False

    @classmethod
    def from_draft(
        cls, draft: ProductDraft, product_id: str, created_at: datetime,
    ) -> "Product":
        """Build a stored product from a draft plus store-owned fields."""
        return cls(id=product_id, created_at=created_at, **_draft_fields(draft))

    def to_dict(self) -> dict[str, Any]:
        """Serialise to JSON-compatible primitives."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "sub_category": self.sub_category,
            "price": str(self.price),
            "image": self.image,
            "specifications": [asdict(s) for s in self.specifications],
            "condition": self.condition,
            "seller": asdict(self.seller),
            "seller_id": self.seller_id,
            "created_at": self.created_at.isoformat(),
            "featured": self.featured,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Rebuild a product from its persisted form."""
        return cls(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description", ""),
            category=data.get("category", ""),
            sub_category=data.get("sub_category"),
            price=Decimal(str(data["price"])),
            image=data.get("image", ""),
            specifications=tuple(
                Specification(name=s["name"], value=s["value"])
                for s in data.get("specifications", [])
            ),
            condition=data.get("condition", ""),
            seller=Seller.from_dict(data.get("seller", {})),
            seller_id=str(data["seller_id"]),
            created_at=parse_timestamp(data["created_at"]),
            featured=bool(data.get("featured", False)),
        )


def _draft_fields(draft: ProductDraft) -> dict[str, Any]:
    # asdict() would also flatten the nested Seller/Specification values
    return {name: getattr(draft, name) for name in draft.__dataclass_fields__}


# Store-owned fields, plus the seller snapshot which is frozen at creation.
PROTECTED_FIELDS: frozenset[str] = frozenset(
    {"id", "seller_id", "created_at", "seller"}
)

# Fields a caller may change through ``CatalogStore.update``.
EDITABLE_FIELDS: frozenset[str] = frozenset(
    name
    for name in Product.__dataclass_fields__
    if name not in PROTECTED_FIELDS
)
