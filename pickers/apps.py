# pickers/apps.py
"""
Application configuration for the pickers module.

This module defines the Django application configuration for the
pickers app, which provides date and date/time picker form fields.
"""

from django.apps import AppConfig


class PickersConfig(AppConfig):
    """
    Configuration class for the pickers application.

    Attributes
    ----------
    name : str
        The full Python path to the application.
    verbose_name : str
        Human readable name of the application.
    """

    name = "pickers"
    verbose_name = "Date pickers"
