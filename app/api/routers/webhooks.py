# app/api/routers/webhooks.py
import json
from typing import Any, Dict

from fastapi import APIRouter, Body

from app.domain.schemas import ApiMessage
from app.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/ucp", tags=["ucp"])


@router.post("/webhooks", response_model=ApiMessage)
def receive_webhook(event: Dict[str, Any] = Body(...)):
    # TODO: weryfikacja podpisu, gdy partner UCP udostepni klucz
    logger.info(f"Odebrano webhook UCP: {json.dumps(event, default=str)}")
    return ApiMessage(message="Webhook received")
