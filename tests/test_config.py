import pytest
from pydantic import ValidationError

from backend.media_drop.cli import build_settings
from backend.media_drop.core.settings import Settings
from backend.media_drop.utils.address import parse_listen_address
from backend.media_drop.utils.sizes import parse_size


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("512", 512),
        ("512B", 512),
        ("10K", 10 * 1024),
        ("10kb", 10 * 1024),
        ("50M", 50 * 1024 * 1024),
        ("1.5G", int(1.5 * 1024**3)),
        ("2TB", 2 * 1024**4),
    ],
)
def test_parse_size(value: str, expected: int) -> None:
    assert parse_size(value) == expected


@pytest.mark.parametrize("value", ["", "M", "ten", "10Q", "-5M"])
def test_parse_size_rejects_garbage(value: str) -> None:
    with pytest.raises(ValueError):
        parse_size(value)


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        (":9090", ("0.0.0.0", 9090)),
        ("127.0.0.1:8000", ("127.0.0.1", 8000)),
        ("[::1]:7000", ("::1", 7000)),
    ],
)
def test_parse_listen_address(address: str, expected: tuple) -> None:
    assert parse_listen_address(address) == expected


def test_parse_listen_address_requires_port() -> None:
    with pytest.raises(ValueError):
        parse_listen_address("localhost")


def test_settings_are_frozen() -> None:
    settings = Settings(storage_dir="media")

    with pytest.raises(ValidationError):
        settings.storage_dir = "elsewhere"


def test_settings_reject_bad_size() -> None:
    with pytest.raises(ValidationError):
        Settings(max_file_size="lots")


def test_settings_expose_body_limit() -> None:
    assert Settings(max_file_size="2K").max_body_bytes == 2048


def test_cli_flags_override_settings() -> None:
    settings = build_settings(
        [
            "--address",
            "127.0.0.1:8080",
            "--storage",
            "/srv/uploads",
            "--max-file-size",
            "10M",
            "--username",
            "admin",
            "--password",
            "hunter2",
            "--enable-auth",
            "--disable-csrf",
        ]
    )

    assert settings.address == "127.0.0.1:8080"
    assert settings.storage_dir == "/srv/uploads"
    assert settings.max_body_bytes == 10 * 1024 * 1024
    assert settings.username == "admin"
    assert settings.password == "hunter2"
    assert settings.enable_auth is True
    assert settings.enable_csrf is False


def test_cli_defaults_leave_auth_off(monkeypatch) -> None:
    monkeypatch.delenv("MEDIA_DROP_ENABLE_AUTH", raising=False)

    settings = build_settings([])

    assert settings.enable_auth is False
    assert settings.enable_csrf is True
