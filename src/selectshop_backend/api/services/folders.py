"""Folder management logic for authenticated users."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from selectshop_backend.database import FolderRepository, FolderSchema, UserSchema
from selectshop_backend.database.schemas.folder import FOLDER_NAME_MAX_LENGTH

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when caller-supplied folder data is rejected."""


class FolderService:
    """Creates and lists folders owned by a single user.

    Names are stripped of surrounding whitespace before validation. A request
    is applied all-or-nothing: every name is checked before any folder is
    added, so a rejected request persists nothing.
    """

    def __init__(self, *, name_max_length: int = FOLDER_NAME_MAX_LENGTH) -> None:
        self._name_max_length = name_max_length

    def add_folders(
        self,
        *,
        session: Session,
        folder_names: Sequence[str],
        user: UserSchema,
    ) -> list[FolderSchema]:
        """Create one folder per name for ``user``.

        Raises:
            InvalidArgumentError: a name is blank, too long, repeated in the
                request, or already used by one of the user's folders.
        """

        try:
            names = self._normalize(folder_names)
        except InvalidArgumentError as exc:
            logger.warning("Rejected folder names for user %s: %s", user.id, exc)
            raise
        if not names:
            return []

        repository = FolderRepository(session)
        existing = repository.list_by_user_and_names(user.id, names)
        if existing:
            taken = {folder.name for folder in existing}
            name = next(name for name in names if name in taken)
            logger.warning("User %s already has folder %r", user.id, name)
            raise InvalidArgumentError(f"Folder name already exists: {name}")

        folders = repository.add_all(
            [FolderSchema(name=name, user_id=user.id) for name in names]
        )
        logger.info("Created %d folder(s) for user %s", len(folders), user.id)
        return folders

    def get_folders(self, *, session: Session, user: UserSchema) -> list[FolderSchema]:
        """Return every folder owned by ``user`` in creation order."""

        return FolderRepository(session).list_by_user(user.id)

    def _normalize(self, folder_names: Sequence[str]) -> list[str]:
        names: list[str] = []
        seen: set[str] = set()
        for raw in folder_names:
            name = raw.strip()
            if not name:
                raise InvalidArgumentError("Folder name must not be blank.")
            if len(name) > self._name_max_length:
                msg = (
                    f"Folder name must be at most {self._name_max_length} "
                    f"characters: {name[:20]}..."
                )
                raise InvalidArgumentError(msg)
            if name in seen:
                raise InvalidArgumentError(f"Duplicate folder name in request: {name}")
            seen.add(name)
            names.append(name)
        return names
