"""FastAPI endpoint for cargo optimizer."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from cargo_optimizer.config import get_settings
from cargo_optimizer.containers import list_presets
from cargo_optimizer.io.schemas import PackingRequest, PackingResponse
from cargo_optimizer.metrics import summarize
from cargo_optimizer.packing.best_fit import pack_items
from cargo_optimizer.render import build_render_payload

logger = logging.getLogger(__name__)

settings = get_settings()

# FastAPI app instance (exactly one)
app = FastAPI(
    title="Cargo Optimizer API",
    description="Container and ULD load planning service",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)


def build_response(request: PackingRequest, include_render: bool = False) -> PackingResponse:
    """
    Run one packing pass for a request.

    Invalid item lines are dropped before packing. Raises ValueError for an
    unknown container preset.
    """
    container = request.to_container()
    result = pack_items(container, request.valid_cargo_items())

    render = None
    if include_render:
        # Colours follow the full item list, dropped lines included.
        render = build_render_payload(container, request.cargo_items(), result)

    return PackingResponse(
        result=result,
        summary=summarize(container, result),
        render=render,
    )


@app.post("/pack", response_model=PackingResponse)
def pack(
    request: PackingRequest,
    render: int = Query(0, description="Include rendering data (1) or not (0)"),
) -> PackingResponse:
    """
    Pack a container and return the plan.

    Input (request body):
        {
            "container": { "preset": "20ft" },
            "items": [
                { "id": "A", "length": 120, "width": 80, "height": 100,
                  "weight": 500, "quantity": 1, "orientation": "any" }
            ]
        }
    """
    try:
        response = build_response(request, include_render=render == 1)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    summary = response.summary
    logger.info(
        f"placed_units={summary.placed_count}, "
        f"unplaced_units={summary.unplaced_count}, "
        f"volume_utilization={summary.volume_utilization:.3f}"
    )
    return response


@app.get("/presets")
def presets(mode: Optional[str] = Query(None, description="Transport mode: sea or air")) -> dict[str, Any]:
    """Container / ULD presets for one transport mode."""
    try:
        table = list_presets(mode or settings.default_mode)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {name: container.model_dump() for name, container in table.items()}


@app.get("/health")
def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}
