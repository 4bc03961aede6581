# pickers/formatting.py
"""
Locale-aware date pattern helpers.

This module wraps Babel to turn ICU style codes into CLDR date
patterns, to format dates with such patterns, and to parse submitted
values back with the month, day and period names of the locale.
The calendar is always Gregorian.
"""

import datetime
import functools
import logging
import re

from babel import Locale, UnknownLocaleError
from babel.dates import format_datetime, tokenize_pattern
from django.conf import settings
from django.utils import translation

from .exceptions import DateFormatError, InvalidOptionsError

logger = logging.getLogger(__name__)

# ICU style codes, as used by IntlDateFormatter
FULL = 0
LONG = 1
MEDIUM = 2
SHORT = 3
NONE = -1

#: Time style paired with a date style when seconds are wanted
DEFAULT_TIME_FORMAT = MEDIUM

STYLE_NAMES = {
    FULL: 'full',
    LONG: 'long',
    MEDIUM: 'medium',
    SHORT: 'short',
}

#: ICU falls back to this pattern when both styles are NONE
FALLBACK_PATTERN = 'yyyyMMdd hh:mm a'

# numeric pattern letter -> parsed component
NUMERIC_FIELDS = {
    'y': 'year',
    'M': 'month',
    'L': 'month',
    'd': 'day',
    'H': 'hour',
    'k': 'hour',
    'h': 'hour12',
    'K': 'hour12',
    'm': 'minute',
    's': 'second',
    'S': 'fraction',
}

NAME_CONTEXTS = ('format', 'stand-alone')
NAME_WIDTHS = ('abbreviated', 'wide', 'short')
PERIOD_WIDTHS = ('abbreviated', 'wide', 'narrow')


def get_current_locale():
    """
    Return the active Django language as a locale name.

    Returns
    -------
    str
        A locale identifier such as ``en_US`` or ``fr``.
    """
    return translation.to_locale(translation.get_language() or settings.LANGUAGE_CODE)


def parse_locale(locale):
    """
    Build a Babel locale from a locale name.

    Both ``en_US`` and ``en-US`` spellings are accepted.

    Raises
    ------
    babel.UnknownLocaleError
        If Babel has no data for the locale.
    ValueError
        If the identifier is malformed.
    """
    return Locale.parse(str(locale).replace('-', '_'))


def get_pattern(locale, date_style, time_style=NONE):
    """
    Generate the CLDR pattern for a pair of ICU styles.

    Parameters
    ----------
    locale : str
        Locale whose conventions are used.
    date_style : int
        One of ``FULL``, ``LONG``, ``MEDIUM``, ``SHORT`` or ``NONE``.
    time_style : int
        Same codes as ``date_style``. ``NONE`` leaves the time out.

    Returns
    -------
    str
        The generated pattern, e.g. ``MMM d, y, h:mm a`` for
        ``en_US`` with medium date and short time.

    Raises
    ------
    InvalidOptionsError
        If a style code is unknown or the locale cannot be loaded.
    """
    for style in (date_style, time_style):
        if style != NONE and style not in STYLE_NAMES:
            raise InvalidOptionsError('Unknown date/time style code %r.' % style)
    try:
        babel_locale = parse_locale(locale)
    except (UnknownLocaleError, ValueError) as e:
        raise InvalidOptionsError('Unknown locale "%s".' % locale) from e

    date_pattern = time_pattern = None
    if date_style != NONE:
        date_pattern = babel_locale.date_formats[STYLE_NAMES[date_style]].pattern
    if time_style != NONE:
        time_pattern = babel_locale.time_formats[STYLE_NAMES[time_style]].pattern

    if date_pattern and time_pattern:
        # the glue pattern of the date style decides how both parts join
        glue = str(babel_locale.datetime_formats[STYLE_NAMES[date_style]])
        return glue.replace('{1}', date_pattern).replace('{0}', time_pattern)
    return date_pattern or time_pattern or FALLBACK_PATTERN


def format_date_value(value, pattern, locale):
    """
    Format a date or datetime with an ICU pattern.

    Plain dates are formatted as midnight of that day.

    Parameters
    ----------
    value : datetime.date
        The value to format.
    pattern : str
        CLDR/ICU date pattern.
    locale : str
        Locale used for names of months, days, etc.

    Returns
    -------
    str
        The formatted value.

    Raises
    ------
    DateFormatError
        If the pattern cannot be applied to the value.
    """
    if not isinstance(value, datetime.datetime):
        value = datetime.datetime.combine(value, datetime.time.min)
    try:
        formatted = format_datetime(value, pattern, locale=parse_locale(locale))
    except (UnknownLocaleError, ValueError, KeyError, AttributeError, TypeError) as e:
        logger.error('cannot format %r with pattern "%s" (%s): %s', value, pattern, locale, e)
        raise DateFormatError('The format "%s" is invalid.' % pattern) from e
    if not isinstance(formatted, str):
        logger.error('formatting %r with pattern "%s" returned %r', value, pattern, formatted)
        raise DateFormatError('The format "%s" is invalid.' % pattern)
    return formatted


def _collect_names(data, widths=NAME_WIDTHS):
    """Map the lowercased names of a Babel months, days or periods table to their keys."""
    names = {}
    for context in NAME_CONTEXTS:
        for width in widths:
            for key, name in data.get(context, {}).get(width, {}).items():
                if name:
                    names.setdefault(name.lower(), key)
    return names


def _names_regex(names):
    # longest first so that "mars" is not cut down to "mar"
    return '(%s)' % '|'.join(re.escape(name) for name in sorted(names, key=len, reverse=True))


@functools.lru_cache(maxsize=128)
def _compile_parser(pattern, locale):
    babel_locale = parse_locale(locale)
    regex = []
    fields = []
    for kind, value in tokenize_pattern(pattern):
        if kind == 'chars':
            regex.append(''.join(r'\s+' if char.isspace() else re.escape(char) for char in value))
            continue
        char, count = value
        if char in 'ML' and count >= 3:
            names = _collect_names(babel_locale.months)
            fields.append(('month', names))
            regex.append(_names_regex(names))
        elif char == 'E' or (char in 'ec' and count >= 3):
            names = _collect_names(babel_locale.days)
            fields.append((None, names))
            regex.append(_names_regex(names))
        elif char == 'a':
            names = {
                name: key
                for name, key in _collect_names(babel_locale.day_periods, PERIOD_WIDTHS).items()
                if key in ('am', 'pm')
            }
            fields.append(('period', names))
            regex.append(_names_regex(names))
        elif char in NUMERIC_FIELDS:
            fields.append((NUMERIC_FIELDS[char], count))
            if char == 'S':
                regex.append(r'(\d+)')
            elif char == 'y':
                regex.append(r'(\d{2})' if count == 2 else r'(\d{1,4})')
            else:
                regex.append(r'(\d{1,2})')
        else:
            logger.debug('pattern "%s" has field %s which cannot be parsed', pattern, char * count)
            return None
    return re.compile('^%s$' % ''.join(regex), re.IGNORECASE), tuple(fields)


def parse_date_value(value, pattern, locale):
    """
    Parse a string written with an ICU pattern.

    Month, day and period names are matched against the locale's
    names, in any case, so that the output of ``format_date_value``
    (and of the client picker using the same pattern) is accepted.

    Parameters
    ----------
    value : str
        The submitted text.
    pattern : str
        CLDR/ICU date pattern.
    locale : str
        Locale of the names in ``value``.

    Returns
    -------
    datetime.datetime or None
        A naive datetime, or None when the value does not match, the
        pattern has fields that cannot be parsed or lacks the year,
        month or day.
    """
    if not pattern or not isinstance(value, str):
        return None
    try:
        parser = _compile_parser(pattern, str(locale))
    except (UnknownLocaleError, ValueError) as e:
        logger.debug('cannot build a parser for pattern "%s" (%s): %s', pattern, locale, e)
        return None
    if parser is None:
        return None
    regex, fields = parser
    match = regex.match(value.strip())
    if not match:
        return None

    parts = {}
    for (component, spec), text in zip(fields, match.groups()):
        if component is None:
            continue
        if isinstance(spec, dict):
            if text.lower() not in spec:
                return None
            parts[component] = spec[text.lower()]
        elif component == 'fraction':
            parts[component] = int((text + '000000')[:6])
        elif component == 'year' and spec == 2:
            year = int(text)
            parts[component] = 2000 + year if year < 69 else 1900 + year
        else:
            parts[component] = int(text)

    if not {'year', 'month', 'day'} <= set(parts):
        return None
    hour = parts.get('hour', 0)
    if 'hour12' in parts:
        hour = parts['hour12'] % 12
        if parts.get('period') == 'pm':
            hour += 12
    try:
        return datetime.datetime(
            parts['year'],
            parts['month'],
            parts['day'],
            hour,
            parts.get('minute', 0),
            parts.get('second', 0),
            parts.get('fraction', 0),
        )
    except ValueError:
        return None
