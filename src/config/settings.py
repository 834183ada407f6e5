# src/config/settings.py

"""Central configuration for the ecofinds marketplace."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the ecofinds marketplace."""

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = Path(
        os.getenv("ECOFINDS_DATA_DIR", str(BASE_DIR / "data"))
    )
    LOGS_DIR: Path = Path(
        os.getenv("ECOFINDS_LOGS_DIR", str(BASE_DIR / "logs"))
    )

    # --- Storage keys (one persisted document per store) ---
    PRODUCTS_KEY: str = "ecofinds-products"
    CART_KEY: str = "ecofinds-cart"
    PURCHASES_KEY: str = "ecofinds-purchases"
    ACCOUNTS_KEY: str = "ecofinds-accounts"
    CURRENT_USER_KEY: str = "ecofinds-user"

    # --- Auth ---
    AUTH_DELAY: float = float(os.getenv("ECOFINDS_AUTH_DELAY", "1.0"))

    # --- Storefront ---
    CURRENCY_SYMBOL: str = "₹"
    FEATURED_LIMIT: int = 4
    PRICE_PLACES: int = 2
