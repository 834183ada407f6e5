# src/models/category.py

"""Static category taxonomy used for filtering and navigation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A top-level category with its ordered sub-categories."""

    name: str
    icon: str
    sub_categories: tuple[str, ...]


CATEGORIES: tuple[Category, ...] = (
    Category(
        name="Electronics",
        icon="laptop",
        sub_categories=("Phones", "Computers", "Audio", "Cameras", "Accessories"),
    ),
    Category(
        name="Clothing",
        icon="shirt",
        sub_categories=("Men", "Women", "Kids", "Shoes", "Accessories"),
    ),
    Category(
        name="Home & Garden",
        icon="home",
        sub_categories=("Furniture", "Decor", "Kitchen", "Garden", "Lighting"),
    ),
    Category(
        name="Books",
        icon="book-open",
        sub_categories=("Fiction", "Non-fiction", "Textbooks", "Comics"),
    ),
    Category(
        name="Sports",
        icon="dumbbell",
        sub_categories=("Cycling", "Fitness", "Outdoor", "Team Sports"),
    ),
    Category(
        name="Beauty",
        icon="sparkles",
        sub_categories=("Skincare", "Makeup", "Fragrance", "Hair"),
    ),
    Category(
        name="Toys & Games",
        icon="gamepad-2",
        sub_categories=("Board Games", "Video Games", "Puzzles", "Figures"),
    ),
    Category(
        name="Art & Collectibles",
        icon="palette",
        sub_categories=("Paintings", "Prints", "Coins", "Vintage"),
    ),
)


def find_category(name: str) -> Category | None:
    """Return the category called *name* (case-insensitive), if any."""
    wanted = name.strip().lower()
    for category in CATEGORIES:
        if category.name.lower() == wanted:
            return category
    return None
