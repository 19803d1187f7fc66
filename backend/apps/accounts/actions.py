"""
Form action for the login/registration page.

The action only validates field constraints. Credential checks, sessions and
account lookup live elsewhere; a submission that passes validation is
answered with a bare success marker.
"""
import logging
from dataclasses import dataclass, field

from django.db import models
from django.utils.translation import gettext_lazy as _

from .forms import validate_at

logger = logging.getLogger(__name__)


class LoginType(models.TextChoices):
    LOGIN = "login", _("Login")
    REGISTER = "register", _("Register")


@dataclass(frozen=True)
class LoginSubmission:
    """Values posted by the login form for a single request."""

    login_type: str | None
    username: str | None
    password: str | None
    redirect_to: str

    @classmethod
    def from_form(cls, data, default_redirect: str) -> "LoginSubmission":
        """
        Build a submission from posted form data.

        Absent fields become None; an absent or empty ``redirectTo`` falls back
        to ``default_redirect``.
        """
        return cls(
            login_type=data.get("loginType"),
            username=data.get("username"),
            password=data.get("password"),
            redirect_to=data.get("redirectTo") or default_redirect,
        )

    @property
    def fields(self) -> dict:
        return {
            "loginType": self.login_type,
            "username": self.username,
            "password": self.password,
        }


@dataclass(frozen=True)
class FieldErrors:
    username: str | None = None
    password: str | None = None

    @property
    def has_errors(self) -> bool:
        return self.username is not None or self.password is not None

    @property
    def invalid_fields(self) -> list[str]:
        return list(self.as_dict())

    def as_dict(self) -> dict:
        """Only the fields that failed, keyed by field name."""
        errors = {"username": self.username, "password": self.password}
        return {name: message for name, message in errors.items() if message is not None}


@dataclass(frozen=True)
class LoginAccepted:
    redirect_to: str


@dataclass(frozen=True)
class LoginRejected:
    field_errors: FieldErrors
    fields: dict = field(default_factory=dict)

    def as_payload(self, echo_password: bool = True) -> dict:
        fields = dict(self.fields)
        if not echo_password:
            fields["password"] = None
        return {"fieldErrors": self.field_errors.as_dict(), "fields": fields}


def handle_login(submission: LoginSubmission) -> LoginAccepted | LoginRejected:
    """
    Validate a login/registration submission.

    Both fields are always validated so every error is reported at once.

    Args:
        submission: Posted values for this request

    Returns:
        LoginRejected with per-field errors and the echoed fields, or
        LoginAccepted when both fields pass
    """
    field_errors = FieldErrors(
        username=validate_at("username", submission.username).message,
        password=validate_at("password", submission.password).message,
    )

    if field_errors.has_errors:
        logger.info(
            "Rejected %s submission, invalid fields: %s",
            submission.login_type or "unknown",
            ", ".join(field_errors.invalid_fields),
        )
        return LoginRejected(field_errors=field_errors, fields=submission.fields)

    logger.debug("Accepted %s submission", submission.login_type or "unknown")
    return LoginAccepted(redirect_to=submission.redirect_to)
