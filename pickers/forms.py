# pickers/forms.py
"""
Forms for the pickers application.

This module defines the demonstration form rendered by the demo
page, showing a date picker next to a date/time picker.
"""

from django import forms

from .fields import DatePickerField, DateTimePickerField


class PickerDemoForm(forms.Form):
    """
    Form with a date picker and a date/time picker.

    Fields are built in ``__init__`` so that their patterns follow
    the language active for the current request.

    Parameters
    ----------
    *args : tuple
        Positional arguments passed to the base form.
    **kwargs : dict
        Keyword arguments. May include ``locale`` to force the locale
        of both pickers.
    """

    def __init__(self, *args, **kwargs):
        locale = kwargs.pop("locale", None)
        super().__init__(*args, **kwargs)
        self.fields["start_date"] = DatePickerField(
            label="Start date",
            locale=locale,
            picker_options={"dp_calendar_weeks": True},
        )
        self.fields["appointment"] = DateTimePickerField(
            label="Appointment",
            required=False,
            locale=locale,
            picker_options={"dp_side_by_side": True, "dp_minute_stepping": 5},
        )

    def clean(self):
        cleaned_data = super().clean()
        start_date = cleaned_data.get("start_date")
        appointment = cleaned_data.get("appointment")
        if start_date and appointment and appointment.date() < start_date:
            self.add_error("appointment", "The appointment cannot be before the start date.")
        return cleaned_data
