# services/storage.py
"""
Local persistence for the student roster.

FileStorage is a small durable key-value store (one JSON object in a UTF-8
file) with the same get/set/remove surface as browser localStorage.
LocalStorageHelper keeps the serialized roster in one named slot of it and
never raises: storage faults are logged, load() falls back to an empty roster
and save()/clear() become no-ops.
"""
import os
import json
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import TypeAdapter

import config
from models.student import Student

# Set up logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

_roster_adapter = TypeAdapter(List[Student])

class FileStorage:
    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.path} does not hold a JSON object")
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def _read_for_write(self) -> Tuple[Dict[str, str], bool]:
        """Current contents, and whether the file was unreadable and must be rewritten."""
        try:
            return self._read_all(), False
        except ValueError as e:
            logger.error(f"Discarding unreadable storage file {self.path}: {e}")
            return {}, True

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data, _ = self._read_for_write()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data, corrupt = self._read_for_write()
        if key in data or corrupt:
            data.pop(key, None)
            self._write_all(data)

class LocalStorageHelper:
    def __init__(self, storage: FileStorage, key: str = config.STUDENT_STORAGE_KEY):
        self.storage = storage
        self.key = key

    def save(self, students: Sequence[Student]) -> None:
        try:
            payload = _roster_adapter.dump_json(list(students)).decode("utf-8")
            self.storage.set_item(self.key, payload)
            logger.info(f"Saved {len(students)} students to slot '{self.key}'")
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error saving students to local storage: {e}")

    def load(self) -> List[Student]:
        try:
            payload = self.storage.get_item(self.key)
            if payload is None:
                return []
            return _roster_adapter.validate_json(payload)
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error loading students from local storage: {e}")
            return []

    def clear(self) -> None:
        try:
            self.storage.remove_item(self.key)
            logger.info(f"Student data cleared from slot '{self.key}'")
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error clearing local storage: {e}")
