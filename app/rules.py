"""
Fixed normalization and parsing rules.

This file exists to make non-goals explicit and enforceable:
nothing here is configurable at runtime.
"""

# Lowercase in title case unless the word leads the title.
# Matched against the raw token, so "Ka" is not a minor word.
MINOR_WORDS = frozenset({"ka", "ki", "ke", "se", "aur", "ya", "the", "of", "in", "a", "an"})

TOKEN_SEPARATOR = " "

# "DD/MM/YYYY, HH:MM - Sender Name: Message text"
EXPECTED_LINE_FORMAT = "<date>, <time> - <sender>: <message>"
DATE_DELIMITER = ","
TIME_DELIMITER = "-"
SENDER_DELIMITER = ":"
PAYLOAD_OFFSET = 2  # the colon and the space after it

FUNNY_KEYWORDS = frozenset({"😂", ":)", "haha"})
LOVE_KEYWORDS = frozenset({"\u2764", "love", "pyaar"})  # bare heart, no variation selector

# Characters removed by trimming: space separators, BOM and line terminators.
# Differs from str.strip(): includes U+FEFF, excludes U+001C-U+001F and U+0085.
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
