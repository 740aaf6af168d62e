# app/utils/settings.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

UCP_MERCHANT_ID = os.getenv("UCP_MERCHANT_ID", "vegan-breakfast-shop")
UCP_API_VERSION = os.getenv("UCP_API_VERSION", "1.0")

TAX_RATE = Decimal(os.getenv("TAX_RATE", "0.08"))
SHIPPING_COST = Decimal(os.getenv("SHIPPING_COST", "5.99"))
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "USD")
CHECKOUT_SESSION_TTL_SECONDS = int(os.getenv("CHECKOUT_SESSION_TTL_SECONDS", 30*60))

UCP_WEBHOOK_FORWARD_URL = os.getenv("UCP_WEBHOOK_FORWARD_URL")
WEBHOOK_TIMEOUT_SECONDS = int(os.getenv("WEBHOOK_TIMEOUT_SECONDS", 2))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))
