from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from cellgrid_backend.api.deps import get_table_service
from cellgrid_backend.engine.models import ChangeTableRequest, CreateTableRequest, TableState
from cellgrid_backend.engine.service import TableRegistryService
from cellgrid_backend.exceptions import TableError


router = APIRouter(prefix="/table")


def _client_error(exc: TableError) -> HTTPException:
    return HTTPException(status_code=400, detail={"code": exc.code, "message": exc.message})


@router.post("", response_model=TableState)
async def create_table(
    request: CreateTableRequest,
    service: TableRegistryService = Depends(get_table_service),
) -> TableState:
    return await service.create_table(request.id, request.size_y, request.size_x)


@router.get("/{table_id}", response_model=TableState)
async def get_table(
    table_id: str,
    service: TableRegistryService = Depends(get_table_service),
) -> TableState:
    try:
        return await service.get_table(table_id)
    except TableError as exc:
        raise _client_error(exc) from exc


@router.put("")
async def change_table(
    request: ChangeTableRequest,
    service: TableRegistryService = Depends(get_table_service),
) -> bool:
    try:
        await service.change_table(request.id, request.y, request.x, request.value)
    except TableError as exc:
        raise _client_error(exc) from exc
    return True
