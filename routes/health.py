"""Health probe endpoint."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Container/load-balancer friendly health probe."""
    return {"status": "healthy"}
