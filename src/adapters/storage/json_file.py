"""Almacén persistente en un fichero JSON.

Por qué un fichero:
- Es el equivalente local de un almacén de navegador: sobrevive a reinicios
  y vive junto al `.env` del usuario.

Nota:
- Cada operación lee y reescribe el fichero completo; no hay bloqueo entre
  procesos (la última escritura gana).
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from core.domain.errors import StorageError
from core.interfaces.storage import KeyValueStore


class JsonFileKeyValueStore(KeyValueStore):
    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        raw = self._path.read_text(encoding="utf-8")
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Corrupt storage file: {self._path}") from exc
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise StorageError(f"Unexpected storage layout in {self._path}")
        return data

    def _write(self, data: dict[str, str]) -> None:
        # Temporal en el mismo directorio + os.replace: el fichero nunca queda a medias.
        self._path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def clear(self) -> None:
        if self._path.exists():
            self._write({})
