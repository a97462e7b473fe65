"""JSON-file-backed implementation of CartStorage.

The file plays the role of the browser's local storage: a flat JSON
object of string keys to string values.  The cart lives under one key,
other keys in the file are left alone.

A file whose contents cannot be parsed makes ``load`` fail, but ``save``
and ``delete`` start over from an empty object so the cart can still be
written or cleared.  Only real I/O failures stop a write.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import PersistenceError
from storefront.domain.repository.cart_storage import CART_STORAGE_KEY, CartStorage

logger = logging.getLogger(__name__)


class CorruptStorageFile(PersistenceError):
    """The storage file exists but does not hold a JSON object."""


class JsonCartStorage(CartStorage):

    def __init__(self, file_path: Path, key: str = CART_STORAGE_KEY) -> None:
        self._file_path = file_path
        self._key = key

    # --- CartStorage interface ------------------------------------------------

    def load(self) -> str | None:
        value = self._load_raw().get(self._key)
        return value if isinstance(value, str) else None

    def save(self, payload: str) -> None:
        records = self._load_or_reset()
        records[self._key] = payload
        self._persist_raw(records)

    def delete(self) -> None:
        try:
            records = self._load_raw()
        except CorruptStorageFile as exc:
            logger.warning("%s; resetting storage file", exc)
            self._persist_raw({})
            return
        if records.pop(self._key, None) is not None:
            self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_or_reset(self) -> dict[str, str]:
        try:
            return self._load_raw()
        except CorruptStorageFile as exc:
            logger.warning("%s; overwriting with a fresh storage file", exc)
            return {}

    def _load_raw(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise CorruptStorageFile(f"Cannot decode {self._file_path}: {exc}") from exc
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CorruptStorageFile(f"Cannot parse {self._file_path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise CorruptStorageFile(f"{self._file_path} does not hold a JSON object")
        return raw

    def _persist_raw(self, records: dict[str, str]) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc
