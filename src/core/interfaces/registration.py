"""Contrato del cliente de registro.

Un único método asíncrono porque hace I/O (HTTP). El flujo de
alta depende de esta abstracción y no de httpx.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from core.domain.models import RegistrationRequest


@runtime_checkable
class Registrar(Protocol):
    async def register(self, user: RegistrationRequest | Mapping[str, Any]) -> Any:
        """Registra al usuario y devuelve el payload JSON de respuesta."""

        ...
