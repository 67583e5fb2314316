"""
Unit tests for core.services.signup_flow.

Tests cover:
  • Invalid form short-circuits before any request
  • Token extraction (top level / enveloped / missing)
  • Token persistence and heading update on success
  • RegistrationError propagation
"""

from __future__ import annotations

from typing import Any

import pytest

from core.domain.errors import RegistrationError
from core.domain.models import Credentials, RegistrationRequest
from core.services.signup_flow import extract_token, sign_up, welcome_heading


class FakeRegistrar:
    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.calls: list[RegistrationRequest] = []

    async def register(self, user):
        self.calls.append(user)
        if self.error is not None:
            raise self.error
        return self.payload


class FakeElement:
    def __init__(self) -> None:
        self.text = "Register"

    def set_text(self, text: str) -> None:
        self.text = text


class FakeDocument:
    def __init__(self) -> None:
        self.h1 = FakeElement()

    def query_selector(self, selector: str):
        return self.h1 if selector == "h1" else None


VALID = Credentials(email="ola@stud.noroff.no", password="supersecret")


class TestExtractToken:
    def test_top_level(self):
        assert extract_token({"accessToken": "t"}) == "t"

    def test_enveloped(self):
        assert extract_token({"data": {"accessToken": "t"}}) == "t"

    def test_missing(self):
        assert extract_token({"data": {"name": "ola"}}) is None
        assert extract_token(["not", "a", "dict"]) is None


@pytest.mark.asyncio
async def test_invalid_form_makes_no_request(token_store):
    registrar = FakeRegistrar(payload={"accessToken": "t"})
    result = await sign_up(
        Credentials(email="a@gmail.com", password="short"),
        registrar=registrar,
        token_store=token_store,
    )
    assert result.validation.is_valid is False
    assert result.registered is False
    assert registrar.calls == []
    assert token_store.get_token() is None


@pytest.mark.asyncio
async def test_success_stores_token_and_updates_heading(token_store):
    registrar = FakeRegistrar(payload={"data": {"name": "ola", "accessToken": "tok"}})
    document = FakeDocument()

    result = await sign_up(
        VALID,
        name="ola",
        registrar=registrar,
        token_store=token_store,
        document=document,
    )

    assert result.registered is True
    assert result.token == "tok"
    assert token_store.get_token() == "tok"
    assert document.h1.text == welcome_heading(name="ola", email=VALID.email)
    assert len(registrar.calls) == 1
    assert registrar.calls[0].to_payload() == {
        "email": VALID.email,
        "password": VALID.password,
        "name": "ola",
    }


@pytest.mark.asyncio
async def test_name_is_omitted_when_not_given(token_store):
    registrar = FakeRegistrar(payload={"accessToken": "tok"})
    await sign_up(VALID, registrar=registrar, token_store=token_store)
    assert "name" not in registrar.calls[0].to_payload()


@pytest.mark.asyncio
async def test_missing_token_is_a_warning(token_store):
    result = await sign_up(
        VALID, registrar=FakeRegistrar(payload={"data": {}}), token_store=token_store
    )
    assert result.registered is True
    assert result.token is None
    assert result.warnings
    assert token_store.get_token() is None


@pytest.mark.asyncio
async def test_registration_error_propagates(token_store):
    document = FakeDocument()
    registrar = FakeRegistrar(error=RegistrationError(status_code=400))
    with pytest.raises(RegistrationError, match="Registration failed"):
        await sign_up(VALID, registrar=registrar, token_store=token_store, document=document)
    assert token_store.get_token() is None
    assert document.h1.text == "Register"


@pytest.mark.asyncio
async def test_heading_updated_flag(token_store):
    registrar = FakeRegistrar(payload={"accessToken": "tok"})

    with_heading = await sign_up(
        VALID, registrar=registrar, token_store=token_store, document=FakeDocument()
    )
    without_heading = await sign_up(
        VALID,
        registrar=registrar,
        token_store=token_store,
        document=FakeDocument(),
        heading_selector="#missing",
    )
    no_document = await sign_up(VALID, registrar=registrar, token_store=token_store)

    assert with_heading.heading_updated is True
    assert without_heading.heading_updated is False
    assert no_document.heading_updated is False
