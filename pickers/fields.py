# pickers/fields.py
"""
Form fields backed by the picker widgets.

The fields parse submitted values with the pattern resolved by
their widget first, so that what the client-side picker writes in
the input is accepted, then fall back to Django's input formats.
"""

import logging

from django import forms
from django.forms.utils import from_current_timezone

from .formatting import parse_date_value
from .widgets import DatePickerWidget, DateTimePickerWidget

logger = logging.getLogger(__name__)


class PickerFieldMixin:
    """
    Build the picker widget of a temporal field from picker options.

    Parameters
    ----------
    picker_options : dict, optional
        Options handed to the widget.
    locale : str, optional
        Locale of the widget; the active language when omitted.
    format_converter : MomentFormatConverter, optional
        Converter handed to the widget.
    """

    picker_widget_class = None

    def __init__(self, *, picker_options=None, locale=None, format_converter=None, **kwargs):
        kwargs['widget'] = self.picker_widget_class(
            attrs=kwargs.pop('attrs', None),
            options=picker_options,
            locale=locale,
            format_converter=format_converter,
        )
        super().__init__(**kwargs)

    def parse_picker_value(self, value):
        """Return the value parsed with the widget pattern and locale, or None."""
        parsed = parse_date_value(value, self.widget.options['format'], self.widget.locale)
        if parsed is None and isinstance(value, str) and value.strip():
            logger.debug('"%s" does not match picker format "%s"', value, self.widget.options['format'])
        return parsed


class DatePickerField(PickerFieldMixin, forms.DateField):
    picker_widget_class = DatePickerWidget

    def to_python(self, value):
        parsed = self.parse_picker_value(value)
        if parsed is not None:
            return parsed.date()
        return super().to_python(value)


class DateTimePickerField(PickerFieldMixin, forms.DateTimeField):
    picker_widget_class = DateTimePickerWidget

    def to_python(self, value):
        parsed = self.parse_picker_value(value)
        if parsed is not None:
            return from_current_timezone(parsed)
        return super().to_python(value)
