# storefront/utils/settings.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

# sql | redis
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
STORAGE_PREFIX = os.getenv("STORAGE_PREFIX", "kawther-")

CURRENCY = os.getenv("CURRENCY", "EGP")
SHIPPING_FEE = Decimal(os.getenv("SHIPPING_FEE", "50"))
FREE_SHIPPING_THRESHOLD = Decimal(os.getenv("FREE_SHIPPING_THRESHOLD", "1000"))
COLD_CHAIN_FEE = Decimal(os.getenv("COLD_CHAIN_FEE", "30"))

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@kawther.com")
ORDER_NUMBER_PREFIX = os.getenv("ORDER_NUMBER_PREFIX", "KW")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
