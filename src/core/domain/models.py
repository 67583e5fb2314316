"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Facilita la serialización exacta de los payloads que viajan al servicio.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- No se normaliza nada (mayúsculas, espacios): lo que entra es lo que se valida
  y lo que se envía.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic.config import ConfigDict


class Credentials(BaseModel):
    """Email + password tal cual los introdujo el usuario."""

    email: str = Field(
        ...,
        description="Email introducido (sin normalizar).",
    )
    password: str = Field(
        ...,
        description="Password introducido (sin normalizar).",
    )


class ValidationMessages(BaseModel):
    """Mensajes visibles para el usuario cuando falla la validación.

    Por qué un modelo y no literales:
    - Son constantes configurables: quien llama puede sustituirlos sin tocar
      las reglas de validación.
    """

    model_config = ConfigDict(frozen=True)

    email: str = Field(
        default="Please enter a valid Noroff email address (@noroff.no or @stud.noroff.no).",
        min_length=1,
    )
    password: str = Field(
        default="Password must be at least 8 characters long.",
        min_length=1,
    )


DEFAULT_MESSAGES = ValidationMessages()

FORM_FIELDS = frozenset({"email", "password"})


class ValidationResult(BaseModel):
    """Veredicto del formulario.

    `is_valid` se calcula a partir de `errors`; no se puede fijar por separado.
    """

    model_config = ConfigDict(frozen=True)

    errors: dict[str, str] = Field(
        default_factory=dict,
        description="Mapa campo -> mensaje; claves en {'email', 'password'}.",
    )

    @field_validator("errors")
    @classmethod
    def _known_fields_only(cls, value: dict[str, str]) -> dict[str, str]:
        unknown = set(value) - FORM_FIELDS
        if unknown:
            raise ValueError(f"Unknown form fields: {sorted(unknown)}")
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.errors


class RegistrationRequest(BaseModel):
    """Datos de alta que se envían sin filtrar al servicio.

    Se aceptan campos extra porque el payload se reenvía verbatim.
    """

    model_config = ConfigDict(extra="allow")

    name: str | None = Field(
        default=None,
        description="Nombre público del usuario (opcional).",
    )
    email: str = Field(..., description="Email de registro.")
    password: str = Field(..., description="Password de registro.")

    def to_payload(self) -> dict[str, Any]:
        """Payload JSON: solo los campos que el llamador fijó explícitamente."""

        return self.model_dump(mode="json", exclude_unset=True)
