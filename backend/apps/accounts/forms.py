from django import forms
from django.core.exceptions import ValidationError
from django.core.validators import ProhibitNullCharactersValidator
from django.utils.translation import gettext_lazy as _

from .validation import FieldResult, Invalid, Valid


class CredentialField(forms.CharField):
    """CharField limited to the required and minimum length constraints."""

    def __init__(self, **kwargs):
        kwargs.setdefault("strip", False)
        super().__init__(**kwargs)
        self.validators = [
            v for v in self.validators if not isinstance(v, ProhibitNullCharactersValidator)
        ]


class LoginForm(forms.Form):
    """
    Field constraints for the login/registration page.

    Only ``username`` and ``password`` are validated. ``loginType`` and
    ``redirectTo`` travel with the submission untouched.
    """

    username = CredentialField(
        min_length=3,
        error_messages={
            "required": _("username is a required field"),
            "min_length": _("username must be at least %(limit_value)d characters"),
        },
    )
    password = CredentialField(
        min_length=6,
        error_messages={
            "required": _("password is a required field"),
            "min_length": _("password must be at least %(limit_value)d characters"),
        },
    )


def validate_at(field_name: str, value) -> FieldResult:
    """
    Validate a single field of ``LoginForm`` in isolation.

    Args:
        field_name: "username" or "password"
        value: Raw submitted value, None when the field was absent

    Returns:
        Valid() or Invalid(message) with the first failing constraint
    """
    field = LoginForm.base_fields[field_name]
    try:
        field.clean(value)
    except ValidationError as exc:
        return Invalid(str(exc.messages[0]))
    return Valid()
