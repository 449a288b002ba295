from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from werkzeug.security import generate_password_hash

from ..common.validators import optional_text, require_min_length, require_non_empty
from ..core.constants import (
    DEFAULT_ADMIN_EMAIL,
    DEFAULT_ADMIN_NAME,
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_SIGNUP_NAME,
    MIN_PASSWORD_LENGTH,
)
from ..core.enums import Role
from ..core.exceptions import ConflictError, ValidationError
from .model import AdminUser
from .repository import AdminUserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BootstrapResult:
    user: AdminUser
    created: bool


class AdminAccountService:
    """Use cases: bootstrap the default admin and sign up further admins."""

    def __init__(self, users: AdminUserRepository):
        self._users = users

    def init_default_admin(self) -> BootstrapResult:
        existing = self._users.get_by_email(DEFAULT_ADMIN_EMAIL)
        if existing:
            return BootstrapResult(user=existing, created=False)

        user = self._create(email=DEFAULT_ADMIN_EMAIL, password=DEFAULT_ADMIN_PASSWORD, full_name=DEFAULT_ADMIN_NAME)
        logger.info("Default admin account created")
        return BootstrapResult(user=user, created=True)

    def signup(self, *, email: Any, password: Any, name: Any = None) -> AdminUser:
        if not email or not password:
            raise ValidationError("Email and password are required")

        email = require_non_empty(email, "Email").lower()
        if "@" not in email:
            raise ValidationError("Email is not valid")
        require_min_length(str(password), "Password", MIN_PASSWORD_LENGTH)
        full_name = optional_text(name, "Name") or DEFAULT_SIGNUP_NAME

        if self._users.get_by_email(email):
            raise ConflictError("An account with this email already exists")

        user = self._create(email=email, password=str(password), full_name=full_name)
        logger.info("Admin account created for %s", email)
        return user

    def _create(self, *, email: str, password: str, full_name: str) -> AdminUser:
        password_hash = generate_password_hash(password)
        user_id = self._users.create_user(
            email=email,
            full_name=full_name,
            password_hash=password_hash,
            role=Role.ADMIN,
        )
        return AdminUser(user_id=user_id, email=email, full_name=full_name, password_hash=password_hash)
