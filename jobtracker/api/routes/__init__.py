"""
API router aggregating all route modules.
"""

from fastapi import APIRouter, Depends

from jobtracker.api.deps import require_identity, resolve_identity
from jobtracker.api.routes import applications, auth, documents, interviews

# Every /api request gets its bearer token resolved first
router = APIRouter(dependencies=[Depends(resolve_identity)])

protected = [Depends(require_identity)]

# Include all route modules
router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
router.include_router(
    applications.router,
    prefix="/applications",
    tags=["Applications"],
    dependencies=protected,
)
router.include_router(
    interviews.router,
    prefix="/interviews",
    tags=["Interviews"],
    dependencies=protected,
)
router.include_router(
    documents.router,
    prefix="/documents",
    tags=["Documents"],
    dependencies=protected,
)
