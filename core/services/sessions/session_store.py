"""Flat JSON file storage for chat sessions."""
import json
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from app.config import settings
from core.models.session import StoreData
from core.services.errors.exceptions import SessionStoreError
from core.utils.logger import logger


class SessionStore:
    """
    Reads and writes `{"sessions": [...], "templates": {...}}` in one file.

    Every call reads or rewrites the whole file; the last write wins.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or settings.DATA_PATH)

    def _ensure_exists(self) -> None:
        if self.path.exists():
            return
        logger.info(f"Session file {self.path} not found, creating empty store")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.write(StoreData())

    def read(self) -> StoreData:
        """
        Load the whole store, creating the base file when missing.

        Raises:
            SessionStoreError: File is unreadable or not a valid store document
        """
        self._ensure_exists()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return StoreData.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Failed to read session file {self.path}: {str(e)}")
            raise SessionStoreError(f"Could not read session store: {str(e)}") from e

    def write(self, data: StoreData) -> None:
        """Replace the file content with `data`, pretty-printed."""
        payload = data.model_dump(mode="json")
        # Unused optional entry fields are left out of the file
        for session in payload["sessions"]:
            session["history"] = [
                {key: value for key, value in entry.items() if value is not None}
                for entry in session["history"]
            ]
        try:
            self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write session file {self.path}: {str(e)}")
            raise SessionStoreError(f"Could not write session store: {str(e)}") from e
