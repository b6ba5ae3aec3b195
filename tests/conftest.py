from pathlib import Path

import pytest

from taskmgr.models import db
from taskmgr.repository import TaskRepository
from taskmgr_app import create_app


@pytest.fixture()
def app(tmp_path: Path):
    app = create_app({
        'TESTING': True,
        'DATABASE_PATH': str(tmp_path / "tasks.db"),
    })
    yield app
    with app.app_context():
        db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def repo(app):
    with app.app_context():
        yield TaskRepository(db.session)
