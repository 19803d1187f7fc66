"""
Login and registration page.
"""
from django.conf import settings
from django.http import HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_http_methods

from apps.accounts.actions import LoginRejected, LoginSubmission, LoginType, handle_login

from .utils import wants_json


def login_page_context(request, result=None) -> dict:
    """
    Template context for the login page.

    Args:
        request: HTTP request; its ``redirectTo`` query parameter feeds the
            hidden redirect field
        result: Last action result, None when nothing was submitted

    Returns:
        Dict with redirect_to, login_type, fields and field_errors
    """
    fields = None
    field_errors = None
    if isinstance(result, LoginRejected):
        fields = dict(result.fields)
        if not settings.LOGIN_ECHO_PASSWORD:
            fields["password"] = None
        field_errors = result.field_errors

    login_type = fields.get("loginType") if fields else None
    return {
        "redirect_to": request.GET.get("redirectTo"),
        "login_checked": not login_type or login_type == LoginType.LOGIN,
        "register_checked": login_type == LoginType.REGISTER,
        "fields": fields,
        "field_errors": field_errors,
    }


@require_http_methods(["GET", "POST"])
def login(request):
    """Login/registration form page and its form action."""
    if request.method == "GET":
        return render(request, "web/auth/login.html", login_page_context(request))

    submission = LoginSubmission.from_form(
        request.POST, default_redirect=settings.LOGIN_DEFAULT_REDIRECT
    )
    result = handle_login(submission)
    status = 400 if isinstance(result, LoginRejected) else 200

    if wants_json(request):
        if isinstance(result, LoginRejected):
            payload = result.as_payload(echo_password=settings.LOGIN_ECHO_PASSWORD)
            return JsonResponse(payload, status=status)
        return JsonResponse(True, safe=False)

    return render(
        request,
        "web/auth/login.html",
        login_page_context(request, result),
        status=status,
    )


def healthz(request):
    """Health check endpoint."""
    return HttpResponse("ok")
