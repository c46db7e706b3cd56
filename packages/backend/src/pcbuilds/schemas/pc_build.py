"""Pydantic schemas for PC builds.

Learn: The wire format is camelCase (buildName, createdAt) while the
ORM columns are snake_case. AliasChoices lets the read schema load
from ORM attributes and serialization_alias controls the JSON names.

Older clients send the builder as "buidler"; it is still accepted on
input, responses always use "builder".
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class PCBuildCreate(BaseModel):
    build_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("buildName", "build_name")
    )
    price: Optional[str] = None
    builder: Optional[str] = Field(
        None, validation_alias=AliasChoices("builder", "buidler")
    )

    model_config = {"coerce_numbers_to_str": True}


class PCBuildUpdate(PCBuildCreate):
    """Partial update — only fields present in the body are applied."""


class PCBuildRead(BaseModel):
    id: uuid.UUID
    build_name: str = Field(
        validation_alias=AliasChoices("build_name", "buildName"),
        serialization_alias="buildName",
    )
    price: str
    builder: str
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    model_config = {"from_attributes": True}


class PCBuildDeleted(BaseModel):
    message: str
    deleted_pc: PCBuildRead = Field(
        validation_alias=AliasChoices("deleted_pc", "deletedPc"),
        serialization_alias="deletedPc",
    )
