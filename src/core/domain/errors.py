"""Errores del dominio.

Solo los fallos que el llamador debe manejar se modelan como excepciones:
los errores de validación son datos (`ValidationResult.errors`), un token
ausente es `None` y un encabezado inexistente es un no-op.
"""

from __future__ import annotations

REGISTRATION_FAILED_MESSAGE = "Registration failed"
INVALID_RESPONSE_MESSAGE = "Invalid registration response"


class AuthBootstrapError(Exception):
    """Base de los errores propios del proyecto."""


class RegistrationError(AuthBootstrapError):
    """El servicio remoto rechazó el registro (o respondió algo inservible).

    El mensaje es fijo; el cuerpo de error parseado no se expone.
    """

    def __init__(
        self,
        message: str = REGISTRATION_FAILED_MESSAGE,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class StorageError(AuthBootstrapError):
    """El almacén persistente no se pudo leer o escribir."""
