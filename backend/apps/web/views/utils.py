"""
Shared utility functions for web views.
"""


def wants_json(request) -> bool:
    """
    Check whether the client asked for a JSON response.

    Browsers submitting the form send ``text/html`` first in ``Accept``;
    scripted clients name ``application/json`` explicitly.

    Args:
        request: HTTP request

    Returns:
        True if the Accept header names application/json, False otherwise
    """
    accept = request.headers.get("Accept", "")
    return "application/json" in accept.lower()
