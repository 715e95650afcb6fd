"""FastAPI application entrypoint."""
from __future__ import annotations

import os
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from current_router.api.endpoints import router as route_router


# Comma-separated origins of the map front-ends allowed to call the planner.
# Example: CURRENT_ROUTER_CORS_ORIGINS=https://dashboard.example.org
CORS_ENV = "CURRENT_ROUTER_CORS_ORIGINS"


def cors_origins() -> List[str]:
    raw = os.environ.get(CORS_ENV, "*")
    return [o.strip() for o in raw.split(",") if o.strip()]


app = FastAPI(title="Current-Aware Router")

# Read-only planner: routes are computed per request, nothing is stored.
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(route_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
