"""Sign-up orchestration.

The CLI (or any other entry-point) delegates the whole sign-up sequence to
this module: validate the form, call the registrar, persist the issued token
and reflect the new state in the page heading. Keeping it here leaves the
entry-points free of ordering rules and makes the flow testable with fakes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from core.domain.models import Credentials, RegistrationRequest, ValidationResult
from core.interfaces.document import Document
from core.interfaces.registration import Registrar
from core.services.heading import MAIN_HEADING_SELECTOR, update_main_heading
from core.services.token_store import TokenStore
from core.services.validation import validate_form

logger = logging.getLogger(__name__)

TOKEN_FIELD = "accessToken"


@dataclass
class SignUpResult:
    """Output of a sign-up attempt."""

    validation: ValidationResult
    payload: Any | None = None
    token: Any | None = None
    heading_updated: bool = False
    warnings: list[str] = field(default_factory=list)

    @property
    def registered(self) -> bool:
        return self.payload is not None


def extract_token(payload: Any) -> Any | None:
    """Find the access token in a registration payload.

    Looks at the top level first, then under ``data`` (enveloped responses).
    """

    if not isinstance(payload, dict):
        return None
    if TOKEN_FIELD in payload:
        return payload[TOKEN_FIELD]
    data = payload.get("data")
    if isinstance(data, dict):
        return data.get(TOKEN_FIELD)
    return None


def welcome_heading(*, name: str | None, email: str) -> str:
    return f"Welcome, {name or email}"


async def sign_up(
    credentials: Credentials,
    *,
    registrar: Registrar,
    token_store: TokenStore,
    name: str | None = None,
    document: Document | None = None,
    heading_selector: str = MAIN_HEADING_SELECTOR,
) -> SignUpResult:
    """Run validate -> register -> save token -> update heading.

    An invalid form short-circuits: no request is made. `RegistrationError`
    propagates to the caller untouched.
    """

    validation = validate_form(credentials.email, credentials.password)
    if not validation.is_valid:
        logger.info("Sign-up rejected by validation: %s", sorted(validation.errors))
        return SignUpResult(validation=validation)

    request = RegistrationRequest(
        email=credentials.email,
        password=credentials.password,
        **({"name": name} if name is not None else {}),
    )
    payload = await registrar.register(request)
    result = SignUpResult(validation=validation, payload=payload)

    token = extract_token(payload)
    if token is None:
        result.warnings.append("Registration response did not include an access token.")
    else:
        token_store.save_token(token)
        result.token = token

    if document is not None:
        result.heading_updated = update_main_heading(
            welcome_heading(name=name, email=credentials.email),
            document,
            selector=heading_selector,
        )

    return result
