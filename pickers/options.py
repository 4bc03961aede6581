# pickers/options.py
"""
Option declarations for the picker widgets.

Every option a picker accepts is declared here with the types its
value may take. Options prefixed with ``dp_`` are forwarded to the
client-side picker under the camelCase key given by
``CLIENT_OPTION_KEYS``.
"""

import datetime
import logging
from collections.abc import Mapping

from .exceptions import InvalidOptionTypeError, UndefinedOptionError

logger = logging.getLogger(__name__)

NULL = type(None)

#: Accepted types of every declared option
OPTION_TYPES = {
    'format': (NULL, int, str),
    'date_format': (NULL, str),
    'widget': (str,),
    'datepicker_use_button': (bool,),
    'dp_pick_time': (bool,),
    'dp_pick_date': (bool,),
    'dp_use_current': (bool,),
    'dp_use_seconds': (bool,),
    'dp_use_minutes': (bool,),
    'dp_minute_stepping': (int,),
    'dp_min_date': (NULL, str, datetime.date),
    'dp_max_date': (NULL, str, datetime.date),
    'dp_show_today': (bool,),
    'dp_language': (str,),
    'dp_default_date': (NULL, str),
    'dp_disabled_dates': (list, tuple),
    'dp_enabled_dates': (list, tuple),
    'dp_icons': (Mapping,),
    'dp_use_strict': (bool,),
    'dp_side_by_side': (bool,),
    'dp_days_of_week_disabled': (list, tuple),
    'dp_collapse': (bool,),
    'dp_calendar_weeks': (bool,),
    'dp_view_mode': (str,),
    'dp_min_view_mode': (str,),
}

#: Client-side key of every ``dp_`` option
CLIENT_OPTION_KEYS = {
    'dp_pick_time': 'pickTime',
    'dp_pick_date': 'pickDate',
    'dp_use_current': 'useCurrent',
    'dp_use_seconds': 'useSeconds',
    'dp_use_minutes': 'useMinutes',
    'dp_minute_stepping': 'minuteStepping',
    'dp_min_date': 'minDate',
    'dp_max_date': 'maxDate',
    'dp_show_today': 'showToday',
    'dp_language': 'language',
    'dp_default_date': 'defaultDate',
    'dp_disabled_dates': 'disabledDates',
    'dp_enabled_dates': 'enabledDates',
    'dp_icons': 'icons',
    'dp_use_strict': 'useStrict',
    'dp_side_by_side': 'sideBySide',
    'dp_days_of_week_disabled': 'daysOfWeekDisabled',
    'dp_collapse': 'collapse',
    'dp_calendar_weeks': 'calendarWeeks',
    'dp_view_mode': 'viewMode',
    'dp_min_view_mode': 'minViewMode',
}

TYPE_NAMES = {
    NULL: 'null',
    bool: 'bool',
    int: 'int',
    str: 'string',
    datetime.date: 'date',
    list: 'list',
    tuple: 'tuple',
    Mapping: 'mapping',
}


def check_option_type(name, value):
    """
    Check a value against the declared types of an option.

    ``bool`` being a subclass of ``int``, booleans are only accepted
    where ``bool`` itself is declared.

    Raises
    ------
    UndefinedOptionError
        If the option is not declared.
    InvalidOptionTypeError
        If the value has none of the declared types.
    """
    try:
        allowed = OPTION_TYPES[name]
    except KeyError:
        raise UndefinedOptionError('The option "%s" does not exist.' % name) from None
    if isinstance(value, allowed) and (bool in allowed or not isinstance(value, bool)):
        return
    logger.warning('rejected value %r for option %s', value, name)
    raise InvalidOptionTypeError(name, value, [TYPE_NAMES[t] for t in allowed])


def resolve_options(defaults, options):
    """
    Merge caller options over defaults and validate the result.

    Parameters
    ----------
    defaults : dict
        Baseline values; every key must be a declared option.
    options : Mapping
        Caller overrides.

    Returns
    -------
    dict
        A new dictionary holding the validated options.

    Raises
    ------
    UndefinedOptionError
        If an override names an option unknown to the picker.
    InvalidOptionTypeError
        If any value fails its type constraint.
    """
    unknown = sorted(set(options) - set(defaults))
    if unknown:
        logger.warning('rejected unknown picker options %s', ', '.join(unknown))
        raise UndefinedOptionError(
            'The option(s) "%s" do not exist. Defined options are: "%s".'
            % ('", "'.join(unknown), '", "'.join(sorted(defaults)))
        )
    resolved = dict(defaults)
    resolved.update(options)
    for name, value in resolved.items():
        check_option_type(name, value)
    return resolved
