"""Metrics Scrape — GET /metrics in Prometheus text exposition format.

Invariants:
    - Serves the same registry the instrumenting middleware records into
"""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest


def create_router(registry: CollectorRegistry) -> APIRouter:
    router = APIRouter(tags=["metrics"])

    @router.get("/metrics")
    async def metrics():
        return Response(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)

    return router
