from __future__ import annotations

from datetime import datetime

import pytest

from coach_desk.container import build_container
from coach_desk.database.bootstrap import ensure_default_coach, initialize
from coach_desk.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def db_config(tmp_path) -> dict:
    config = {"path": str(tmp_path / "coach_management.db"), "timeout": 1.0}
    initialize(config)
    ensure_default_coach(config)
    return config


@pytest.fixture
def container(db_config):
    return build_container(db_config=db_config)


@pytest.fixture
def app(tmp_path):
    return create_app(
        settings_module="coach_desk.config.testing",
        db_config={"path": str(tmp_path / "api.db"), "timeout": 1.0},
    )


@pytest.fixture
def client(app):
    return app.test_client()
