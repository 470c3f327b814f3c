from datetime import date

import pytest

from config import Config
from schoolboard import create_app, db
from schoolboard.cli import create_user
from schoolboard.models import Achievement


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "x" * 40
    SQLALCHEMY_DATABASE_URI = "sqlite://"


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    def _make_user(email, password="rahasia123", level=None, roles=()):
        with app.app_context():
            user, message = create_user(email, password, name=email.split("@")[0], level=level, roles=roles)
            assert user is not None, message
            return user.id

    return _make_user


@pytest.fixture
def login(client):
    def _login(email, password="rahasia123"):
        return client.post("/auth/login", data={"email": email, "password": password})

    return _login


@pytest.fixture
def add_achievement(app):
    def _add(title, achievement_date, level, description="Deskripsi", image_url=None):
        with app.app_context():
            row = Achievement(
                title=title,
                description=description,
                achievement_date=achievement_date,
                school_level=level,
                image_url=image_url,
            )
            db.session.add(row)
            db.session.commit()
            return row.id

    return _add


@pytest.fixture
def sample_achievements(add_achievement):
    return {
        "sd_old": add_achievement("Juara Cerdas Cermat", date(2024, 5, 2), "sd"),
        "sd_new": add_achievement("Juara Lomba Renang", date(2025, 8, 17), "sd"),
        "smp": add_achievement("Olimpiade Sains", date(2025, 1, 10), "smp"),
        "sma": add_achievement("Debat Bahasa Inggris", date(2026, 3, 5), "sma"),
    }
