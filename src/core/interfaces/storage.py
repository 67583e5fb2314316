"""Contrato del almacén clave-valor persistente.

Por qué Protocol:
- El `TokenStore` recibe el almacén inyectado en lugar de tocar estado global.
- Cada test puede construir su propio almacén aislado (sin carreras entre casos).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Almacén síncrono de strings (los valores son JSON ya serializado).

    Reglas de diseño:
    - `get` devuelve `None` si la clave no existe; nunca lanza por ausencia.
    - `clear` borra *todas* las entradas, no solo las de un módulo.
    - Sin bloqueos: la última escritura gana.
    """

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...

    def clear(self) -> None:
        ...
