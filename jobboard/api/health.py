"""Health check endpoint with a database connectivity probe."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobboard import __version__
from jobboard.core.config import Settings, get_settings
from jobboard.core.database import check_db_connected, get_db
from jobboard.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Liveness plus database reachability, for load balancers and monitoring."""
    return HealthResponse(
        version=__version__,
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
