# pickers/exceptions.py
"""
Custom exceptions for the pickers application.

This module defines the errors raised while resolving picker
options and while preparing the values handed to the client-side
date picker. They are configuration or programming errors and are
meant to be surfaced to the caller, never retried.
"""


class PickerError(Exception):
    """
    Base class for picker-related errors.

    All custom exceptions of the pickers application inherit from
    this class, so it can be used to catch any of them.
    """


class InvalidOptionsError(PickerError):
    """
    Raised when the options given to a picker cannot be resolved.

    Typically used for a ``format`` that is neither a style code
    nor a pattern string.
    """


class InvalidOptionTypeError(InvalidOptionsError, TypeError):
    """
    Raised when an option value does not match its declared types.

    Attributes
    ----------
    option : str
        Name of the offending option.
    value : object
        The rejected value.
    allowed : tuple of str
        Names of the accepted types.
    """

    def __init__(self, option, value, allowed):
        self.option = option
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            'The option "%s" with value %r is expected to be of type "%s", but is of type "%s".'
            % (option, value, '" or "'.join(self.allowed), type(value).__name__)
        )


class UndefinedOptionError(InvalidOptionsError):
    """
    Raised when an option that the picker does not declare is given.
    """


class DateFormatError(PickerError):
    """
    Raised when a date value cannot be rendered with a pattern.

    Occurs at render time, when ``dp_min_date`` or ``dp_max_date``
    hold a date object that the locale-aware formatter rejects.
    """
