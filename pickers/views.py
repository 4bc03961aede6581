# pickers/views.py
"""
Views for the pickers application.

This module provides the demo page rendering the picker fields and
echoing the values they parsed.
"""

import logging

from django.views.generic import FormView

from .forms import PickerDemoForm

logger = logging.getLogger(__name__)


class PickerDemoView(FormView):
    """
    Display the picker demo form.

    On a valid submission the form is displayed again along with the
    cleaned values, instead of redirecting.
    """

    template_name = "pickers/demo.html"
    form_class = PickerDemoForm

    def form_valid(self, form):
        """
        Render the page with the parsed values.

        Parameters
        ----------
        form : PickerDemoForm
            The validated form.

        Returns
        -------
        HttpResponse
            The demo page including the cleaned data.
        """
        logger.info("picker demo submitted: %s", form.cleaned_data)
        return self.render_to_response(self.get_context_data(form=form, cleaned_data=form.cleaned_data))
