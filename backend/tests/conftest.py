"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from pathlib import Path

import pytest

# Add the project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")


@pytest.fixture
def client():
    """Django test client."""
    from django.test import Client
    return Client()


@pytest.fixture
def json_client():
    """Django test client that asks for JSON responses."""
    from django.test import Client
    return Client(HTTP_ACCEPT="application/json")


@pytest.fixture
def submission_factory():
    """Factory for building login form submissions."""
    from apps.accounts.actions import LoginSubmission

    def create_submission(**kwargs):
        defaults = {
            "login_type": "login",
            "username": "alice",
            "password": "abcdef",
            "redirect_to": "/jokes",
        }
        defaults.update(kwargs)
        return LoginSubmission(**defaults)

    return create_submission
