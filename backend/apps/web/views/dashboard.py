"""
Home page view.
"""
from django.shortcuts import render


def home(request):
    """Landing page linking to the login form."""
    return render(request, "web/home.html")
