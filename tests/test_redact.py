from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from remotedict._redact import redact_for_log


def test_redact_for_log_redacts_sensitive_keys() -> None:
    payload = {
        "id": "42",
        "password": "pw",
        "accessToken": "AT",
        "nested": {"apiKey": "k", "name": "ada"},
        "items": [{"secret": "s"}],
    }

    redacted = redact_for_log(payload)
    assert redacted["id"] == "42"
    assert redacted["password"] == "<redacted>"
    assert redacted["accessToken"] == "<redacted>"
    assert redacted["nested"]["apiKey"] == "<redacted>"
    assert redacted["nested"]["name"] == "ada"
    assert redacted["items"][0]["secret"] == "<redacted>"


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_for_log_summarizes_bytes_and_objects() -> None:
    class Blob:
        def __repr__(self) -> str:
            return "Blob(" + "y" * 100 + ")"

    assert redact_for_log(b"abc") == "<bytes:3b>"
    rendered = redact_for_log(Blob(), max_string=8)
    assert rendered.startswith("Blob(yyy")
    assert rendered.endswith("<truncated>")


def test_redact_for_log_walks_pydantic_models() -> None:
    class Account(BaseModel):
        name: str
        password: str

    redacted = redact_for_log([Account(name="ada", password="hunter2")])
    assert redacted == [{"name": "ada", "password": "<redacted>"}]


def test_redact_for_log_walks_dataclasses() -> None:
    @dataclass
    class Credentials:
        user: str
        api_key: str

    @dataclass
    class Profile:
        id: int
        credentials: Credentials

    redacted = redact_for_log(Profile(id=1, credentials=Credentials(user="ada", api_key="k")))
    assert redacted == {"id": 1, "credentials": {"user": "ada", "api_key": "<redacted>"}}
