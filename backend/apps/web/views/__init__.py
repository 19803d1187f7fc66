"""
Web views module.

- auth: Login/registration page and health check
- dashboard: Home page
- utils: Shared helper functions

Usage:
    from apps.web.views import login
    # or
    from apps.web.views.auth import login
"""

from .auth import healthz, login, login_page_context
from .dashboard import home
from .utils import wants_json

__all__ = [
    # Auth
    "healthz",
    "login",
    "login_page_context",
    # Dashboard
    "home",
    # Utils
    "wants_json",
]
