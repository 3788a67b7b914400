"""Root endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])

GREETING = "Hello World!"

@router.get("/", response_class=PlainTextResponse)
def read_root():
    """Respond with the fixed greeting."""
    return GREETING
