# pickers/app_settings.py
"""
Settings of the pickers application.

Each value below can be overridden from the Django settings module,
under its own name or under one of its aliases. Lookups go through
``django.conf.settings`` every time, so ``override_settings`` applies
in tests.

The client assets default to the cdnjs builds of jQuery, moment.js
and bootstrap-datetimepicker 3, whose option names the ``dp_``
options follow.
"""

from django.conf import settings

CDNJS = "https://cdnjs.cloudflare.com/ajax/libs/"

#: Setting name -> default value
DEFAULTS = {
    # glyph classes of the time, date, up and down icons
    "PICKERS_ICONS": {
        "time": "fa fa-clock-o",
        "date": "fa fa-calendar",
        "up": "fa fa-chevron-up",
        "down": "fa fa-chevron-down",
    },
    # earliest selectable date, as understood by the client widget
    "PICKERS_MIN_DATE": "1/1/1900",
    "PICKERS_JQUERY_JS": CDNJS + "jquery/3.7.1/jquery.min.js",
    "PICKERS_MOMENT_JS": CDNJS + "moment.js/2.29.4/moment-with-locales.min.js",
    "PICKERS_DATETIMEPICKER_JS": CDNJS + "bootstrap-datetimepicker/3.1.3/js/bootstrap-datetimepicker.min.js",
    "PICKERS_DATETIMEPICKER_CSS": CDNJS + "bootstrap-datetimepicker/3.1.3/css/bootstrap-datetimepicker.min.css",
}

#: Older names still honoured
ALIASES = {
    "PICKERS_MOMENT_JS": ("MOMENT_JS",),
}


class PickerSettings:
    """
    Read-only view over the pickers settings.

    Raises
    ------
    AttributeError
        When the requested name is not one of ``DEFAULTS``.
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError("unknown pickers setting %s" % name)
        for candidate in (name,) + ALIASES.get(name, ()):
            if hasattr(settings, candidate):
                return getattr(settings, candidate)
        return DEFAULTS[name]


app_settings = PickerSettings()
