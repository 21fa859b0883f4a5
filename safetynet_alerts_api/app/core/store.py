"""
JSON document store.

All persons, fire stations and medical records live in a single JSON
document.  There is no per‑entity storage: a read parses the whole
document and a write replaces it.  This is adequate for one city's
worth of residents.

Mutations go through ``JsonFileStore.transaction``, which holds a
process‑wide lock for the whole read‑modify‑write cycle so that two
concurrent requests cannot overwrite each other's changes.  Writes go
to a temporary file that is then renamed over the document.

Use ``get_store`` to obtain the store configured from
``settings.data_file``; ``configure_store`` points the application at
another document (tests use it with a temporary copy).
"""

import json
import logging
import os
import stat
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from pydantic import ValidationError

from .config import settings
from .exceptions import DataFileError
from ..schemas.data import Data

logger = logging.getLogger(__name__)


def get_data_path(data_file: Optional[str] = None) -> Path:
    """Compute the path to the data document.

    If the configured path is absolute, use it directly.  Otherwise
    resolve it relative to the ``safetynet_alerts_api`` package
    directory, where the bundled ``data.json`` lives.
    """
    data_file = data_file or settings.data_file
    if os.path.isabs(data_file):
        return Path(data_file)
    base_dir = Path(__file__).resolve().parent.parent.parent  # safetynet_alerts_api/
    return (base_dir / data_file).resolve()


class JsonFileStore:
    """Whole‑document access to the JSON data file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.RLock()

    def get_data(self) -> Data:
        """Read and parse the document.

        Raises ``DataFileError`` if the file is missing, unreadable or
        does not match the document schema.
        """
        with self._lock:
            try:
                raw = self.path.read_bytes()
            except OSError as e:
                logger.error("Failed to read data file %s: %s", self.path, e)
                raise DataFileError(f"Failed to read data file {self.path}") from e
            try:
                return Data.model_validate_json(raw)
            except (ValidationError, UnicodeDecodeError) as e:
                logger.error("Failed to parse data file %s: %s", self.path, e)
                raise DataFileError(f"Failed to parse data file {self.path}") from e

    def write_data(self, data: Data) -> None:
        """Serialize ``data`` and replace the document with it."""
        payload = json.dumps(data.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)
        with self._lock:
            fd, tmp_name = tempfile.mkstemp(prefix=".data-", suffix=".json", dir=str(self.path.parent))
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                    fh.write("\n")
                if self.path.exists():
                    os.chmod(tmp_name, stat.S_IMODE(self.path.stat().st_mode))
                os.replace(tmp_name, self.path)
            except OSError as e:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                logger.error("Failed to write data file %s: %s", self.path, e)
                raise DataFileError(f"Failed to write data file {self.path}") from e

    @contextmanager
    def transaction(self) -> Iterator[Data]:
        """Yield a fresh copy of the document and persist it on success.

        The store lock is held for the whole block.  If the block raises,
        nothing is written and the exception propagates.
        """
        with self._lock:
            data = self.get_data()
            yield data
            self.write_data(data)

    @staticmethod
    def sort_persons_by_last_name_and_first_name(data: Data) -> Data:
        data.persons.sort(key=lambda p: (p.last_name, p.first_name))
        return data

    @staticmethod
    def sort_fire_stations_by_station_number(data: Data) -> Data:
        data.fire_stations.sort(key=lambda fs: fs.station)
        return data

    @staticmethod
    def sort_medical_records_by_last_name_and_first_name(data: Data) -> Data:
        data.medical_records.sort(key=lambda mr: (mr.last_name, mr.first_name))
        return data


_store: Optional[JsonFileStore] = None


def get_store() -> JsonFileStore:
    """Return the application store, creating it from settings on first use."""
    global _store
    if _store is None:
        _store = JsonFileStore(get_data_path())
    return _store


def configure_store(path: Union[str, Path]) -> JsonFileStore:
    """Point the application at the document at ``path``."""
    global _store
    _store = JsonFileStore(get_data_path(str(path)))
    return _store


def init_store() -> None:
    """Check that the data document loads.

    Called at application startup so that a missing or malformed file
    is reported immediately rather than on the first request.
    """
    store = get_store()
    data = store.get_data()
    logger.info(
        "Loaded %s: %d persons, %d fire stations, %d medical records",
        store.path,
        len(data.persons),
        len(data.fire_stations),
        len(data.medical_records),
    )
