"""PC build catalog API routes.

Learn: FastAPI routers define HTTP endpoints. Each route receives
the service via Depends() and delegates to it; NotFoundError and
StorageError raised by the service become 404 / 500 responses.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pcbuilds.db.engine import get_db
from pcbuilds.schemas.pc_build import (
    PCBuildCreate,
    PCBuildDeleted,
    PCBuildRead,
    PCBuildUpdate,
)
from pcbuilds.services.pc_build_service import PCBuildService

router = APIRouter(prefix="/pcs")


def _svc(db: AsyncSession = Depends(get_db)) -> PCBuildService:
    return PCBuildService(db)


@router.get("", response_model=list[PCBuildRead])
async def list_builds(svc: PCBuildService = Depends(_svc)):
    return await svc.list_builds()


@router.get("/{build_id}", response_model=PCBuildRead)
async def get_build(build_id: str, svc: PCBuildService = Depends(_svc)):
    return await svc.get_build(build_id)


@router.post("", response_model=PCBuildRead, status_code=201)
async def create_build(body: PCBuildCreate, svc: PCBuildService = Depends(_svc)):
    return await svc.create_build(body)


@router.put("/{build_id}", response_model=PCBuildRead)
async def update_build(
    build_id: str,
    body: PCBuildUpdate,
    svc: PCBuildService = Depends(_svc),
):
    return await svc.update_build(build_id, body)


@router.delete("/{build_id}", response_model=PCBuildDeleted)
async def delete_build(build_id: str, svc: PCBuildService = Depends(_svc)):
    build = await svc.delete_build(build_id)
    return PCBuildDeleted(
        message="Deleted successfully",
        deleted_pc=PCBuildRead.model_validate(build),
    )
