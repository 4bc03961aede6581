# pickers/converters.py
"""
Date pattern conversion for the client-side picker.

The server resolves ICU (CLDR) date patterns while the browser
widget formats dates with moment.js tokens. Most tokens are shared
by both syntaxes; the others are translated here.
"""

import re

# a pair of quotes, a quoted literal, a run of one letter, or anything else
TOKEN_RE = re.compile(r"''|'(?:[^']|'')*'?|([A-Za-z])\1*|[^A-Za-z']+")

# (letter, run length) -> moment token
FIELD_RULES = {
    ('y', 2): 'YY',
    ('d', 1): 'D',
    ('d', 2): 'DD',
    ('E', 4): 'dddd',
    ('E', 5): 'dd',
    ('E', 6): 'dd',
    ('Z', 5): 'Z',
    ('D', 3): 'DDDD',
}

# letter -> moment token, for run lengths not listed above
LETTER_RULES = {
    'y': 'YYYY',
    'E': 'ddd',
    'a': 'A',
    'Z': 'ZZ',
    'D': 'DDD',
}


class MomentFormatConverter:
    """
    Convert ICU date patterns into moment.js format strings.

    Quoted literals become moment escapes (``'de'`` gives ``[de]``),
    except the ``'T'`` separator which moment keeps as is.
    """

    def convert(self, pattern):
        """
        Translate a pattern; letters without a rule are kept unchanged.

        Parameters
        ----------
        pattern : str
            ICU pattern, e.g. ``dd/MM/yyyy HH:mm``.

        Returns
        -------
        str
            The moment.js equivalent, e.g. ``DD/MM/YYYY HH:mm``.
        """
        return ''.join(self._convert_token(m.group(0)) for m in TOKEN_RE.finditer(pattern or ''))

    def _convert_token(self, token):
        if token == "''":
            return "'"
        if token.startswith("'"):
            literal = token[1:-1] if token.endswith("'") and len(token) > 1 else token[1:]
            literal = literal.replace("''", "'")
            if literal == 'T':
                return 'T'
            return '[%s]' % literal
        letter = token[0]
        if not letter.isalpha():
            return token
        if letter == 'L':
            # stand-alone month
            return 'M' * len(token)
        rule = FIELD_RULES.get((letter, len(token)))
        if rule is None:
            rule = LETTER_RULES.get(letter, token)
        return rule
