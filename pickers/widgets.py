# pickers/widgets.py
"""
Date picker widgets.

The widgets in this module configure a bootstrap-datetimepicker
instance. The configuration comes from a set of options that are
validated when the widget is built. At render time the options are
turned into template variables: the moment.js format, the
client-side ``dp_options`` and the button flag.
"""

import datetime
import json
import logging

from django import forms
from django.core.serializers.json import DjangoJSONEncoder
from django.forms.widgets import DateTimeBaseInput

from .app_settings import app_settings
from .converters import MomentFormatConverter
from .exceptions import InvalidOptionsError
from .formatting import (
    DEFAULT_TIME_FORMAT,
    MEDIUM,
    NONE,
    SHORT,
    format_date_value,
    get_current_locale,
    get_pattern,
)
from .options import CLIENT_OPTION_KEYS, resolve_options

logger = logging.getLogger(__name__)


class BasePickerWidget(DateTimeBaseInput):
    """
    Base class of the date and date/time pickers.

    Options are resolved once, in the constructor: defaults are
    merged with the caller's options, every value is type checked
    and ``format`` is normalized into an ICU pattern.

    Parameters
    ----------
    attrs : dict, optional
        HTML attributes of the input.
    options : dict, optional
        Picker options overriding the defaults.
    locale : str, optional
        Locale used to generate and apply patterns. Defaults to the
        active language.
    format_converter : MomentFormatConverter, optional
        Converter of ICU patterns into moment.js format strings.

    Raises
    ------
    UndefinedOptionError
        If an unknown option is given.
    InvalidOptionTypeError
        If an option value has the wrong type.
    InvalidOptionsError
        If ``format`` cannot be resolved.
    """

    format_key = 'DATETIME_INPUT_FORMATS'
    input_type = 'text'
    template_name = 'pickers/widgets/picker.html'

    def __init__(self, attrs=None, options=None, locale=None, format_converter=None):
        super().__init__(attrs)
        self.locale = locale or get_current_locale()
        self.format_converter = format_converter or MomentFormatConverter()
        self.options = self.resolve_options(options or {})

    @property
    def media(self):
        return forms.Media(
            css={'all': (app_settings.PICKERS_DATETIMEPICKER_CSS,)},
            js=(
                app_settings.PICKERS_JQUERY_JS,
                app_settings.PICKERS_MOMENT_JS,
                app_settings.PICKERS_DATETIMEPICKER_JS,
                'pickers/js/pickers.js',
            ),
        )

    def get_locale(self):
        return self.locale

    def set_locale(self, locale):
        # already resolved formats are kept
        self.locale = locale

    def get_common_defaults(self):
        """
        Gets base default options for the date pickers.

        Returns
        -------
        dict
            Options shared by every picker.
        """
        return {
            'widget': 'single_text',
            'datepicker_use_button': True,
            'date_format': None,
            'dp_pick_time': True,
            'dp_pick_date': True,
            'dp_use_current': True,
            'dp_min_date': app_settings.PICKERS_MIN_DATE,
            'dp_max_date': None,
            'dp_show_today': True,
            'dp_language': self.locale,
            'dp_default_date': '',
            'dp_disabled_dates': [],
            'dp_enabled_dates': [],
            'dp_icons': dict(app_settings.PICKERS_ICONS),
            'dp_use_strict': False,
            'dp_side_by_side': False,
            'dp_days_of_week_disabled': [],
            'dp_collapse': True,
            'dp_calendar_weeks': False,
            'dp_view_mode': 'days',
            'dp_min_view_mode': 'days',
        }

    def get_default_options(self):
        defaults = self.get_common_defaults()
        defaults['format'] = None
        return defaults

    def resolve_options(self, options):
        resolved = resolve_options(self.get_default_options(), options)
        resolved['format'] = self.normalize_format(resolved)
        logger.debug('resolved picker format "%s" for locale %s', resolved['format'], self.locale)
        return resolved

    def normalize_format(self, options):
        """
        Resolve the ``format`` option into an ICU pattern.

        A string ``date_format`` always wins. An integer ``format`` is
        a date style code, paired with a time style that depends on
        ``dp_pick_time`` and ``dp_use_seconds``. A string or absent
        ``format`` is kept as is.
        """
        date_format = options.get('date_format')
        if isinstance(date_format, str):
            return date_format

        format = options.get('format')
        if isinstance(format, int) and not isinstance(format, bool):
            time_format = NONE
            if options.get('dp_pick_time') is True:
                time_format = DEFAULT_TIME_FORMAT if options.get('dp_use_seconds') is True else SHORT
            return get_pattern(self.locale, format, time_format)
        if format is None or isinstance(format, str):
            return format
        raise InvalidOptionsError('The option "format" must be a style code or a pattern, got %r.' % (format,))

    def finish_view(self):
        """
        Compute the template variables of the picker.

        Works on a copy of the resolved options.

        Returns
        -------
        dict
            ``moment_format``, ``type``, ``datepicker_use_button`` and
            ``dp_options``.

        Raises
        ------
        DateFormatError
            If ``dp_min_date`` or ``dp_max_date`` holds a date that
            cannot be formatted with the resolved pattern.
        """
        options = dict(self.options)
        format = options['format'] or ''

        # use seconds if it's allowed in format
        options['dp_use_seconds'] = 's' in format

        # without a pattern, dates are left for the JSON encoder (ISO 8601)
        for name in ('dp_min_date', 'dp_max_date'):
            if format and isinstance(options.get(name), datetime.date):
                options[name] = format_date_value(options[name], format, self.locale)

        dp_options = {
            CLIENT_OPTION_KEYS[name]: value for name, value in options.items() if name.startswith('dp_')
        }
        return {
            'moment_format': self.format_converter.convert(format),
            'type': 'text',
            'datepicker_use_button': options.get('datepicker_use_button') is True,
            'dp_options': dp_options,
        }

    def get_context(self, name, value, attrs):
        context = super().get_context(name, value, attrs)
        view_vars = self.finish_view()
        view_vars['dp_options_json'] = json.dumps(view_vars['dp_options'], cls=DjangoJSONEncoder)
        context['widget'].update(view_vars)
        return context

    def format_value(self, value):
        if isinstance(value, datetime.date) and self.options['format']:
            return format_date_value(value, self.options['format'], self.locale)
        return super().format_value(value)


class DatePickerWidget(BasePickerWidget):
    """
    Picker showing only the calendar.

    The default format is the locale's medium date pattern.
    """

    format_key = 'DATE_INPUT_FORMATS'
    template_name = 'pickers/widgets/date_picker.html'

    def get_default_options(self):
        defaults = super().get_default_options()
        defaults.update(
            {
                'dp_pick_time': False,
                'format': MEDIUM,
            }
        )
        return defaults


class DateTimePickerWidget(BasePickerWidget):
    """
    Picker showing the calendar and the clock.

    The default format is the locale's medium date pattern followed
    by a time pattern with seconds.
    """

    template_name = 'pickers/widgets/datetime_picker.html'

    def get_default_options(self):
        defaults = super().get_default_options()
        defaults.update(
            {
                'dp_use_minutes': True,
                'dp_use_seconds': True,
                'dp_minute_stepping': 1,
                'format': MEDIUM,
            }
        )
        return defaults
