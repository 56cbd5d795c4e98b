"""Repository helpers for working with folders."""

from collections.abc import Iterable, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from selectshop_backend.database.schemas import FolderSchema


class FolderRepository:
    """Encapsulates persistence operations for :class:`FolderSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_by_user(self, user_id: UUID) -> list[FolderSchema]:
        """Return the user's folders in creation order."""
        stmt = (
            select(FolderSchema)
            .where(FolderSchema.user_id == user_id)
            .order_by(FolderSchema.id)
        )
        return list(self._session.scalars(stmt))

    def list_by_user_and_names(
        self, user_id: UUID, names: Iterable[str]
    ) -> list[FolderSchema]:
        """Return the user's folders whose name is one of ``names``."""
        names = list(names)
        if not names:
            return []
        stmt = select(FolderSchema).where(
            FolderSchema.user_id == user_id, FolderSchema.name.in_(names)
        )
        return list(self._session.scalars(stmt))

    def add_all(self, folders: Sequence[FolderSchema]) -> list[FolderSchema]:
        """Persist folders and populate their generated columns."""
        self._session.add_all(folders)
        self._session.flush()
        for folder in folders:
            self._session.refresh(folder)
        return list(folders)
