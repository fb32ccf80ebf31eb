from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Key-value storage ("memory" | "file")
    storage_backend: str = "memory"
    storage_path: str = "data/local_storage.json"
    basket_key: str = "basket"

    # Credentials ("legacy" | "pbkdf2"). The legacy scheme is NOT secure.
    credential_scheme: str = "legacy"
    credential_salt: str = "fruit_shop_salt"
    pbkdf2_iterations: int = 240_000

    # Pricing
    unit_prices: dict[str, Decimal] = {
        "apple": Decimal("2.99"),
        "banana": Decimal("1.99"),
        "lemon": Decimal("3.49"),
        "pear": Decimal("3.29"),
    }
    default_item_price: Decimal = Decimal("2.99")
    bundle_price: Decimal = Decimal("8.99")
    bundle_prefix: str = "bundle_"

    # Delivery & demo progress simulation
    delivery_window_minutes: int = 120
    progress_initial_delay_seconds: float = 5.0
    progress_step_interval_seconds: float = 30.0

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_accounts: str = "INFO"         # AccountDirectory
    log_level_orders: str = "INFO"           # OrderLedger + progress simulation
    log_level_storage: str = "WARNING"       # key-value store adapters

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
