"""FastAPI dependencies for database access."""

from collections.abc import Iterator
from functools import cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from selectshop_backend.database.service import DatabaseService
from selectshop_backend.settings import BackendSettings, get_settings

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]


@cache
def _build_database_service(database_url: str) -> DatabaseService:
    """Create one :class:`DatabaseService` (and engine) per connection string."""
    return DatabaseService(database_url)


def get_database(settings: SettingsDep) -> DatabaseService:
    """Return the database service for the configured URL."""
    return _build_database_service(settings.database_url)


def get_session(
    db: Annotated[DatabaseService, Depends(get_database)],
) -> Iterator[Session]:
    """Yield the request's session; committed on success, rolled back on error."""
    with db.session() as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]
