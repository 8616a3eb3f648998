"""
Nice string predicate. Pure functions only.
"""

FORBIDDEN_SUBSTRINGS = ("bu", "ba", "be")
VOWELS = "aeiou"
MIN_VOWELS = 3
MIN_RULES = 2


def contains_double_letter(value: str) -> bool:
    return any(a == b for a, b in zip(value, value[1:]))


def is_nice(value: str) -> bool:
    """
    A string is nice if at least two of these hold:
    - it contains none of "bu", "ba", "be";
    - it has at least three vowels (a, e, i, o, u);
    - it contains a double letter ("ee", "ll", ...).
    """
    rules = [
        not any(s in value for s in FORBIDDEN_SUBSTRINGS),
        sum(1 for c in value if c in VOWELS) >= MIN_VOWELS,
        contains_double_letter(value),
    ]
    return sum(rules) >= MIN_RULES
