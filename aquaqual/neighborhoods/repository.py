"""File-backed store of curated neighborhood records."""

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from aquaqual.neighborhoods.schemas import NeighborhoodRecord
from aquaqual.utils.logger import logger

_records_adapter = TypeAdapter(list[NeighborhoodRecord])


class NeighborhoodDataError(Exception):
    """Raised when the neighborhood dataset cannot be read or parsed."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.message = message
        self.path = path


class NeighborhoodRepository:
    """Loads neighborhood records from a JSON array on disk.

    The file is read on every call to ``load`` so edits to the dataset are
    picked up without restarting the server.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> list[NeighborhoodRecord]:
        """Read and validate every record in the dataset.

        Returns:
            Records in file order

        Raises:
            NeighborhoodDataError: If the file is missing, not JSON, or does
                not match the record schema
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
            records = _records_adapter.validate_python(json.loads(raw))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error(
                "[DATA] Failed to load neighborhoods",
                path=str(self.path),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise NeighborhoodDataError(
                f"Failed to load neighborhoods from {self.path}: {e}", self.path
            ) from e

        logger.debug("[DATA] Loaded neighborhoods", count=len(records))
        return records
