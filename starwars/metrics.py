"""Prometheus metrics for the catalog service."""

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry(auto_describe=True)
METRICS_PATH = "/metrics/status"


def register_metrics(app: FastAPI) -> None:
    """Expose the private registry at METRICS_PATH."""

    @app.get(METRICS_PATH, include_in_schema=False)
    async def metrics_endpoint() -> Response:
        return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)


# ─────────────────────────────────────────────────────────────────────────────
# Business metrics
# ─────────────────────────────────────────────────────────────────────────────

CHARACTER_WRITES_TOTAL = Counter(
    "starwars_character_writes_total",
    "Character write operations by outcome",
    ["operation", "status"],
    registry=REGISTRY,
)

CATALOG_QUERY_SECONDS = Histogram(
    "starwars_catalog_query_seconds",
    "Time spent serving paginated catalog queries",
    ["resource"],
    registry=REGISTRY,
)
