# ==============================
# FastAPI App Factory
# ==============================
from __future__ import annotations

from fastapi import FastAPI

from gateway.api.routes_normalize import router as normalize_router


def create_app() -> FastAPI:
    app = FastAPI(title="embeddata", version="0.1.0")
    app.include_router(normalize_router, prefix="/api")
    return app
