"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: Routes live at the root (no /api/v1 prefix) because the refresh
cookie is path-scoped to /auth/refresh-token and existing frontends
call these exact paths. Only GET /auth/user needs a signed-in user; it
declares require_auth itself, so the routers are included as-is.
"""

from fastapi import APIRouter

from pcbuilds.api.auth import router as auth_router
from pcbuilds.api.health import router as health_router
from pcbuilds.api.pc_builds import router as pc_builds_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(pc_builds_router, tags=["pcs"])
