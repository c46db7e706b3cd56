"""PC build service — catalog CRUD.

Learn: Thin layer over the pc_builds table. Ids arrive as raw path
strings; anything that isn't a UUID simply doesn't exist.
"""

import uuid
from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pcbuilds.db.models import PCBuild
from pcbuilds.errors import NotFoundError, RequestValidationFailed, storage_errors
from pcbuilds.schemas.pc_build import PCBuildCreate, PCBuildUpdate

logger = structlog.get_logger()

STORAGE_ERROR_MESSAGE = "Internal server error"


def _parse_id(build_id: str) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(build_id)
    except (ValueError, TypeError):
        return None


class PCBuildService:
    """Business logic for the PC build catalog."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_builds(self) -> list[PCBuild]:
        with storage_errors(STORAGE_ERROR_MESSAGE):
            result = await self.db.execute(
                select(PCBuild).order_by(PCBuild.created_at)
            )
            return list(result.scalars().all())

    async def get_build(self, build_id: str) -> PCBuild:
        uid = _parse_id(build_id)
        build = None
        if uid:
            with storage_errors(STORAGE_ERROR_MESSAGE):
                build = await self.db.get(PCBuild, uid)
        if not build:
            raise NotFoundError("Unable to find pc")
        return build

    async def create_build(self, body: PCBuildCreate) -> PCBuild:
        if not (body.build_name and body.price and body.builder):
            raise RequestValidationFailed("Please fill in all required fields")

        build = PCBuild(
            build_name=body.build_name,
            price=body.price,
            builder=body.builder,
        )
        with storage_errors(STORAGE_ERROR_MESSAGE):
            self.db.add(build)
            await self.db.commit()
            await self.db.refresh(build)

        logger.info("pc_build.created", build_id=str(build.id))
        return build

    async def update_build(self, build_id: str, body: PCBuildUpdate) -> PCBuild:
        """Apply the fields present in the body; absent fields are untouched."""
        build = await self.get_build(build_id)
        changes = {
            field: value
            for field, value in body.model_dump(exclude_unset=True).items()
            if value is not None
        }
        with storage_errors(STORAGE_ERROR_MESSAGE):
            for field, value in changes.items():
                setattr(build, field, value)
            await self.db.commit()
            await self.db.refresh(build)

        logger.info("pc_build.updated", build_id=build_id, fields=sorted(changes))
        return build

    async def delete_build(self, build_id: str) -> PCBuild:
        build = await self.get_build(build_id)
        with storage_errors(STORAGE_ERROR_MESSAGE):
            await self.db.delete(build)
            await self.db.commit()

        logger.info("pc_build.deleted", build_id=build_id)
        return build
