from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from backend.media_drop.core.settings import Settings
from backend.media_drop.main import create_app


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    path = tmp_path / "media"
    path.mkdir()
    return path


@pytest.fixture
def make_settings(tmp_path: Path, storage_dir: Path) -> Callable[..., Settings]:
    def _make(**overrides) -> Settings:
        values = {
            "storage_dir": str(storage_dir),
            "public_dir": str(tmp_path / "public"),
            "enable_csrf": False,
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def make_client(make_settings: Callable[..., Settings]) -> Iterator[Callable[..., TestClient]]:
    clients = []

    def _make(**overrides) -> TestClient:
        client = TestClient(create_app(make_settings(**overrides)))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def client(make_client: Callable[..., TestClient]) -> TestClient:
    return make_client()
