"""JSON document store: one file holds a whole collection as a JSON array."""
import json
import logging
from pathlib import Path
from typing import Generic, List, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from services.errors import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class DocumentStore(Generic[RecordT]):
    """
    Durable storage of one ordered sequence of records.

    Every read loads and parses the whole file and every write serializes the
    whole sequence back. There is no locking: two writers racing on the same
    file can lose an update, and the last write wins.
    """

    def __init__(self, path: Path, model: Type[RecordT]):
        self.path = Path(path)
        self.model = model
        self._adapter = TypeAdapter(List[model])

    @property
    def name(self) -> str:
        return self.path.name

    def ensure_ready(self) -> None:
        """Creates the file holding an empty array if it does not exist yet."""
        if self.path.exists():
            return
        logger.info(f"Creating document store file {self.path}")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps([], indent=2), encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not initialize {self.path}: {e}")
            raise StorageWriteError(f"Could not initialize {self.name}: {e}") from e

    def read_all(self) -> List[RecordT]:
        self.ensure_ready()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read {self.path}: {e}")
            raise StorageReadError(f"Could not read {self.name}: {e}") from e
        try:
            records = self._adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Malformed content in {self.path}: {e}")
            raise StorageReadError(f"Malformed content in {self.name}") from e
        logger.debug(f"Read {len(records)} records from {self.name}")
        return records

    def write_all(self, records: List[RecordT]) -> None:
        self.ensure_ready()
        # Serialize and encode fully before touching the file so a failure here leaves it intact.
        try:
            payload = json.dumps(
                self._adapter.dump_python(records, mode="json", by_alias=True),
                indent=2,
                ensure_ascii=False,
                allow_nan=False,
            ).encode("utf-8")
        except (TypeError, ValueError, PydanticSerializationError) as e:
            logger.error(f"Could not serialize records for {self.path}: {e}")
            raise StorageWriteError(f"Could not serialize {self.name}: {e}") from e
        try:
            self.path.write_bytes(payload)
        except OSError as e:
            logger.error(f"Could not write {self.path}: {e}")
            raise StorageWriteError(f"Could not write {self.name}: {e}") from e
        logger.debug(f"Wrote {len(records)} records to {self.name}")


def find_index(records, record_id: str) -> int:
    """Index of the first record whose id matches, or -1. Works for any record with an id."""
    for index, record in enumerate(records):
        if record.id == record_id:
            return index
    return -1
