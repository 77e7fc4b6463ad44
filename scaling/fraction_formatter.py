"""
Quantity <-> display text.

format_quantity turns a decimal amount into kitchen text, preferring the common
culinary fractions:

    0.5  -> "½"
    1.5  -> "1 ½"
    0.33 -> "⅓"
    2.1  -> "2.1"

parse_quantity reads such text (and plain "1 1/2" style input) back into a float.
"""

import math
import re
from typing import Optional

# Culinary fractions rendered as glyphs, in ascending order
FRACTION_GLYPHS = [
    (1 / 8, "⅛"),
    (1 / 4, "¼"),
    (1 / 3, "⅓"),
    (3 / 8, "⅜"),
    (1 / 2, "½"),
    (5 / 8, "⅝"),
    (2 / 3, "⅔"),
    (3 / 4, "¾"),
    (7 / 8, "⅞"),
]

# Max distance between a remainder and a fraction for the glyph to be used
FRACTION_TOLERANCE = 0.02

# Glyphs accepted when parsing (a superset of the ones we emit)
GLYPH_VALUES = {glyph: value for value, glyph in FRACTION_GLYPHS}
GLYPH_VALUES.update({
    "⅙": 1 / 6, "⅚": 5 / 6,
    "⅕": 1 / 5, "⅖": 2 / 5, "⅗": 3 / 5, "⅘": 4 / 5,
})
GLYPH_CLASS = "".join(GLYPH_VALUES)

_WHOLE_WITH_GLYPH_RE = re.compile(rf"^(\d+)([{GLYPH_CLASS}])$")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_DECIMAL_RE = re.compile(r"^(?:\d+(?:\.\d+)?|\.\d+)$")


def _glyph_for(remainder: float) -> Optional[str]:
    """Closest fraction glyph within tolerance, or None"""
    best = None
    best_distance = FRACTION_TOLERANCE
    for value, glyph in FRACTION_GLYPHS:
        distance = abs(remainder - value)
        if distance <= best_distance:
            best, best_distance = glyph, distance
    return best


def _with_glyph(amount: float) -> Optional[str]:
    whole = math.floor(amount)
    glyph = _glyph_for(amount - whole)
    if glyph is None:
        return None
    return f"{whole} {glyph}" if whole else glyph


def format_quantity(amount: float) -> str:
    """
    Render an amount for display.

    Fractional remainders within 0.02 of a culinary fraction become a glyph
    (with the whole part in front when nonzero). Everything else is a decimal
    with at most one digit after the point and no trailing ".0".
    Any real number is accepted (int, float, Decimal, Fraction).
    Negative, NaN and infinite amounts are malformed and render as "0".
    """
    try:
        amount = float(amount)
    except (TypeError, ValueError):
        return "0"
    if math.isnan(amount) or math.isinf(amount) or amount < 0:
        return "0"

    text = _with_glyph(amount)
    if text is not None:
        return text

    text = f"{amount:.1f}"
    # 0.46 rounds to 0.5: keep the output stable when it is formatted again
    text = _with_glyph(float(text)) or text
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _parse_token(token: str) -> Optional[float]:
    if token in GLYPH_VALUES:
        return GLYPH_VALUES[token]

    match = _WHOLE_WITH_GLYPH_RE.match(token)
    if match:
        return int(match.group(1)) + GLYPH_VALUES[match.group(2)]

    match = _FRACTION_RE.match(token)
    if match:
        denominator = int(match.group(2))
        if denominator == 0:
            return None
        return int(match.group(1)) / denominator

    if _DECIMAL_RE.match(token):
        return float(token)

    return None


def parse_quantity(text: str) -> Optional[float]:
    """
    Parse "2", "1.5", "1/4", "½", "1½" or "1 1/2" into a float.

    Space separated tokens are summed. Returns None when any token is
    malformed, so callers can treat the text as unscalable.
    """
    if text is None:
        return None
    tokens = str(text).split()
    if not tokens:
        return None

    total = 0.0
    for token in tokens:
        value = _parse_token(token)
        if value is None:
            return None
        total += value
    return total
