"""Tests for container wiring."""

import pytest
from pydantic import ValidationError

from memory_album.config import Settings, parse_allowed_origins
from memory_album.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.album_service is not None
    assert container.memory_service.album_service is container.album_service
    assert container.public_reader.album_service is container.album_service
    container.close_resources()


def test_parse_allowed_origins() -> None:
    assert parse_allowed_origins(None) == []
    assert parse_allowed_origins(" * ") == ["*"]
    assert parse_allowed_origins("https://a.test, ,https://b.test") == [
        "https://a.test",
        "https://b.test",
    ]


@pytest.mark.parametrize(
    "template",
    ["Olha {link", "Sem link nenhum", "{link} e {extra}", "Posicional {}"],
)
def test_settings_reject_bad_share_template(settings, template: str) -> None:
    with pytest.raises(ValidationError):
        Settings(**{**settings.model_dump(), "share_message_template": template})


def test_settings_accept_share_template_with_escaped_braces(settings) -> None:
    configured = Settings(
        **{**settings.model_dump(), "share_message_template": "{{♥}} {link}"}
    )

    assert configured.share_message_template == "{{♥}} {link}"
