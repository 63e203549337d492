from __future__ import annotations

from functools import cached_property

import pytest
from flask import Flask
from flask.testing import FlaskClient

from tracker.app import create_app
from tracker.application.use_cases.tasks import CreateTaskUseCase
from tracker.container import Container
from tracker.shared.config import AppConfig

from .fakes import (
    DeterministicHasher,
    FakeStore,
    InMemoryTaskRepository,
    InMemoryUserRepository,
    TickingClock,
)

TEST_SECRET = "test-secret-key"


class FakeContainer(Container):
    @cached_property
    def store(self) -> FakeStore:
        return FakeStore()

    @cached_property
    def password_hasher(self) -> DeterministicHasher:
        return DeterministicHasher()

    @cached_property
    def user_repository(self) -> InMemoryUserRepository:
        return InMemoryUserRepository()

    @cached_property
    def task_repository(self) -> InMemoryTaskRepository:
        return InMemoryTaskRepository()

    @cached_property
    def create_task_use_case(self) -> CreateTaskUseCase:
        return CreateTaskUseCase(tasks=self.task_repository, clock=TickingClock())


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(JWT_SECRET=TEST_SECRET, APP_ENV="test", _env_file=None)


@pytest.fixture()
def container(config: AppConfig) -> FakeContainer:
    return FakeContainer(config)


@pytest.fixture()
def app(container: FakeContainer) -> Flask:
    return create_app(container=container)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def auth_headers(client: FlaskClient) -> dict[str, str]:
    credentials = {"username": "alice", "password": "secret123"}
    assert client.post("/api/auth/register", json=credentials).status_code == 201
    login = client.post("/api/auth/login", json=credentials)
    assert login.status_code == 200
    return {"Authorization": f"Bearer {login.get_json()['token']}"}
