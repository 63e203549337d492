"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from tracker.application.services.password_hashing import WerkzeugPasswordHasher
from tracker.application.services.tokens import JwtTokenService
from tracker.application.use_cases.tasks import (
    CleanupTasksUseCase,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    ListTasksUseCase,
    SeedTasksUseCase,
    ToggleTaskUseCase,
    UpdateTaskUseCase,
)
from tracker.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from tracker.application.use_cases.users.login_user import LoginUserUseCase
from tracker.application.use_cases.users.register_user import RegisterUserUseCase
from tracker.domain.tasks.repositories import TaskRepository
from tracker.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from tracker.infrastructure.db import MongoStore
from tracker.infrastructure.repositories import MongoTaskRepository, MongoUserRepository
from tracker.interfaces.http.controllers.auth_controller import AuthController
from tracker.interfaces.http.controllers.misc_controller import MiscController
from tracker.interfaces.http.controllers.seed_controller import SeedController
from tracker.interfaces.http.controllers.tasks_controller import TasksController
from tracker.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def store(self) -> MongoStore:
        return MongoStore(self.config.database)

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> TokenService:
        return JwtTokenService(
            secret=self.config.jwt_secret,
            algorithm=self.config.jwt_algorithm,
            ttl=timedelta(hours=self.config.token_ttl_hours),
        )

    @cached_property
    def user_repository(self) -> UserRepository:
        return MongoUserRepository(self.store)

    @cached_property
    def task_repository(self) -> TaskRepository:
        return MongoTaskRepository(self.store)

    # Users

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(users=self.user_repository)

    # Tasks

    @cached_property
    def create_task_use_case(self) -> CreateTaskUseCase:
        return CreateTaskUseCase(tasks=self.task_repository)

    @cached_property
    def list_tasks_use_case(self) -> ListTasksUseCase:
        return ListTasksUseCase(tasks=self.task_repository)

    @cached_property
    def update_task_use_case(self) -> UpdateTaskUseCase:
        return UpdateTaskUseCase(tasks=self.task_repository)

    @cached_property
    def delete_task_use_case(self) -> DeleteTaskUseCase:
        return DeleteTaskUseCase(tasks=self.task_repository)

    @cached_property
    def toggle_task_use_case(self) -> ToggleTaskUseCase:
        return ToggleTaskUseCase(tasks=self.task_repository)

    @cached_property
    def seed_tasks_use_case(self) -> SeedTasksUseCase:
        return SeedTasksUseCase(tasks=self.task_repository)

    @cached_property
    def cleanup_tasks_use_case(self) -> CleanupTasksUseCase:
        return CleanupTasksUseCase(tasks=self.task_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            current_user_use_case=self.get_current_user_use_case,
        )

    @cached_property
    def tasks_controller(self) -> TasksController:
        return TasksController(
            create_use_case=self.create_task_use_case,
            list_use_case=self.list_tasks_use_case,
            update_use_case=self.update_task_use_case,
            delete_use_case=self.delete_task_use_case,
            toggle_use_case=self.toggle_task_use_case,
        )

    @cached_property
    def seed_controller(self) -> SeedController:
        return SeedController(
            seed_use_case=self.seed_tasks_use_case,
            cleanup_use_case=self.cleanup_tasks_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(store=self.store)
