"""Persistencia del token emitido por el servicio.

Por qué una clase con el almacén inyectado:
- El almacén es estado compartido del proceso; inyectarlo permite que cada
  llamador (y cada test) decida cuál usar.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from core.interfaces.storage import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_KEY = "token"


class TokenStore:
    """`save` / `get` / `clear` sobre un único valor serializado en JSON."""

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_TOKEN_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save_token(self, token: Any) -> None:
        """Serializa `token` y lo escribe bajo la clave fija (sobrescribe)."""

        self._store.set(self._key, json.dumps(token))
        logger.debug("Token stored under key %r", self._key)

    def get_token(self) -> Any | None:
        """Devuelve el token deserializado o `None` si no hay ninguno."""

        raw = self._store.get(self._key)
        if raw is None:
            return None
        return json.loads(raw)

    def clear_storage(self) -> None:
        """Vacía el almacén completo, no solo la clave del token."""

        self._store.clear()
        logger.debug("Persistent store cleared")
