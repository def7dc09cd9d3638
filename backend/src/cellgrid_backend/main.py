from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from cellgrid_backend.api.deps import get_table_service
from cellgrid_backend.api.routes import router
from cellgrid_backend.config import get_settings
from cellgrid_backend.engine.models import SERVICE_VERSION
from cellgrid_backend.engine.service import TableRegistryService


settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("cellgrid_backend")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting CellGrid Backend v{SERVICE_VERSION} on {settings.bind_address}")
    yield
    logger.info("Shutting down CellGrid Backend")


app = FastAPI(title="CellGrid Backend", version=SERVICE_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    client = request.client.host if request.client else "-"
    user_agent = request.headers.get("user-agent", "-")
    response = await call_next(request)
    logger.info(f"{client} {user_agent} {request.method} {request.url.path} -> {response.status_code}")
    return response


app.include_router(router)


@app.get("/healthz")
async def healthz(service: TableRegistryService = Depends(get_table_service)) -> dict[str, str | int]:
    return {"status": "ok", "tables": len(await service.table_ids())}


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
