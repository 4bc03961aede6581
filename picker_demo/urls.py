# picker_demo/urls.py
"""
Root URL configuration for the Picker Demo project.

This module defines the global URL routes and delegates
to application-specific ``urls.py`` modules.

For more details, see:
https://docs.djangoproject.com/en/stable/topics/http/urls/
"""

from django.urls import path, include
from django.views.generic import RedirectView

#: Global URL patterns for the project
urlpatterns = [
    # Pickers application (date and date/time picker demo)
    path("pickers/", include("pickers.urls")),

    # Homepage
    path("", RedirectView.as_view(pattern_name="pickers:demo"), name="home"),
]
