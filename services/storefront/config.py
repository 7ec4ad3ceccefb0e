import os

STORE_NAME = os.environ.get("STORE_NAME", "Flipkart Mobiles")
STORE_URL = os.environ.get("STORE_URL", "http://localhost:8000")

# Category shown when /products is requested without one
DEFAULT_CATEGORY = os.environ.get("DEFAULT_CATEGORY", "mobiles")

# Legacy mode ignores the category filter and answers unknown ids with the first product
CATALOG_LEGACY_MODE = os.environ.get("CATALOG_LEGACY_MODE", "").strip().lower() in ("1", "true", "yes")

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))
