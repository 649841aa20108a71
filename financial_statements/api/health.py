"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse)
def root():
    """Plain-text banner, kept from the first version of the API."""
    return "API de Estados Financieros"


@router.get("/health")
def health_check():
    """
    Return application health status.

    The service holds no connections or state, so being able
    to answer at all means it is healthy.
    """
    return {
        "status": "healthy",
        "service": "financial-statements",
    }
