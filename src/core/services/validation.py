"""Reglas de validación del formulario de alta.

Funciones puras: no lanzan nunca y no normalizan la entrada. Los fallos se
devuelven como datos (`ValidationResult.errors`) para que la capa de UI
decida cómo mostrarlos.
"""

from __future__ import annotations

import re
from typing import Any

from core.domain.models import DEFAULT_MESSAGES, ValidationMessages, ValidationResult

EMAIL_DOMAIN = "noroff.no"
MIN_PASSWORD_LENGTH = 8

EMAIL_PATTERN = re.compile(
    rf"^[^\s@]+@(stud\.{re.escape(EMAIL_DOMAIN)}|{re.escape(EMAIL_DOMAIN)})$"
)


def validate_email(email: Any) -> bool:
    """`True` si `email` es una dirección `@noroff.no` o `@stud.noroff.no`."""

    if not isinstance(email, str):
        return False
    # fullmatch: `$` aceptaría un "\n" final.
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_password(password: Any) -> bool:
    """`True` si el password tiene al menos 8 caracteres (`None` cuenta como 0)."""

    if not isinstance(password, str):
        return False
    return len(password) >= MIN_PASSWORD_LENGTH


def validate_form(
    email: Any,
    password: Any,
    *,
    messages: ValidationMessages = DEFAULT_MESSAGES,
) -> ValidationResult:
    """Ejecuta ambas reglas y compone el veredicto.

    Las dos comprobaciones se ejecutan siempre; el orden de `errors` es
    email y luego password.
    """

    errors: dict[str, str] = {}
    email_ok = validate_email(email)
    password_ok = validate_password(password)

    if not email_ok:
        errors["email"] = messages.email
    if not password_ok:
        errors["password"] = messages.password

    return ValidationResult(errors=errors)
