# app/api/routers/health.py
from fastapi import APIRouter

from app.utils.clock import utcnow
from app.utils.settings import UCP_API_VERSION, UCP_MERCHANT_ID

SERVICE_NAME = "vegan-breakfast-ucp-app"
SERVICE_VERSION = "1.0.0"

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {
        "status": "healthy",
        "timestamp": utcnow().isoformat(),
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/")
def root():
    return {
        "name": "Vegan Breakfast Shopping App",
        "description": "UCP-compliant vegan breakfast shopping application",
        "version": SERVICE_VERSION,
        "endpoints": {
            "health": "/health",
            "products": "/api/products",
            "cart": "/api/cart",
            "ucp": "/api/ucp",
        },
        "ucp": {
            "version": UCP_API_VERSION,
            "merchantId": UCP_MERCHANT_ID,
            "capabilities": ["checkout", "order_management", "webhooks"],
        },
    }
