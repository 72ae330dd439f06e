import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _split_csv(value: str) -> list[str]:
    return [v.strip() for v in (value or "").split(",") if v.strip()]


def _to_bool(value: str) -> bool:
    return str(value).strip() in ["1", "true", "True", "YES", "yes"]


class Settings:
    # WooCommerce Configuration
    WC_API_URL: str = os.getenv("WC_API_URL", "").rstrip("/")
    WC_CONSUMER_KEY: str = os.getenv("WC_CONSUMER_KEY", "")
    WC_CONSUMER_SECRET: str = os.getenv("WC_CONSUMER_SECRET", "")
    WC_API_VERSION: str = os.getenv("WC_API_VERSION", "wc/v3")
    WC_TIMEOUT: float = float(os.getenv("WC_TIMEOUT", "15"))
    WC_QUERY_STRING_AUTH: bool = _to_bool(os.getenv("WC_QUERY_STRING_AUTH", "0"))

    # Pagination
    DEFAULT_PER_PAGE: int = int(os.getenv("DEFAULT_PER_PAGE", "12"))
    MAX_PER_PAGE: int = 100

    # CORS
    ALLOWED_ORIGINS: list[str] = _split_csv(
        os.getenv("ALLOWED_ORIGINS", "*")
    )

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Rendering controller
    CATALOG_API_ENDPOINT: str = os.getenv(
        "CATALOG_API_ENDPOINT", "http://localhost:8000/products"
    )


settings = Settings()
