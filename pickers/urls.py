# pickers/urls.py
"""
URL configuration for the pickers application.
"""

from django.urls import path

from .views import PickerDemoView

# Application namespace used for reverse lookups
app_name = "pickers"

#: URL patterns for the pickers application
urlpatterns = [
    # Demo page showing both pickers
    path("", PickerDemoView.as_view(), name="demo"),
]
