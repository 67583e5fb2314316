"""Cliente de registro contra el servicio de autenticación.

Contrato:
- POST `{api_base_url}auth/register` con el payload del usuario en JSON, tal cual.
- El cuerpo se parsea como JSON *antes* de mirar el status, también en errores.
- Status fuera de 2xx -> `RegistrationError` con mensaje fijo. El cuerpo de
  error parseado solo se registra en DEBUG; no se expone al llamador.
- Una sola petición por llamada, sin reintentos.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import (
    INVALID_RESPONSE_MESSAGE,
    REGISTRATION_FAILED_MESSAGE,
    RegistrationError,
)
from core.domain.models import RegistrationRequest
from core.interfaces.registration import Registrar

logger = logging.getLogger(__name__)

REGISTER_PATH = "auth/register"

_MISSING = object()


def serialize_user(user: RegistrationRequest | Mapping[str, Any]) -> str:
    """Serializa el payload sin filtrar ni transformar campos."""

    if isinstance(user, RegistrationRequest):
        return json.dumps(user.to_payload())
    return json.dumps(dict(user))


def _parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return _MISSING


class RegistrationClient(Registrar):
    """Implementación httpx del `Registrar`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    @property
    def url(self) -> str:
        return f"{self._settings.api_base_url}{REGISTER_PATH}"

    async def register(self, user: RegistrationRequest | Mapping[str, Any]) -> Any:
        body = serialize_user(user)
        headers = {"Content-Type": "application/json"}
        logger.debug("POST %s", self.url)

        # Un 3xx es un fallo: seguirlo haría una segunda petición.
        if self._client is not None:
            response = await self._client.post(
                self.url, content=body, headers=headers, follow_redirects=False
            )
        else:
            async with build_async_client(self._settings) as client:
                response = await client.post(
                    self.url, content=body, headers=headers, follow_redirects=False
                )

        payload = _parse_json(response)

        if not response.is_success:
            logger.warning("Registration rejected with HTTP %s", response.status_code)
            if payload is not _MISSING:
                logger.debug("Discarded error body: %r", payload)
            raise RegistrationError(
                REGISTRATION_FAILED_MESSAGE, status_code=response.status_code
            )

        if payload is _MISSING:
            logger.warning("Registration returned HTTP %s with a non-JSON body", response.status_code)
            raise RegistrationError(
                INVALID_RESPONSE_MESSAGE, status_code=response.status_code
            )

        return payload


async def register(
    user: RegistrationRequest | Mapping[str, Any],
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """Atajo funcional sobre `RegistrationClient.register`."""

    return await RegistrationClient(settings, client=client).register(user)
