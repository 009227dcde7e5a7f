import re


_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_exercise_name(text: str) -> str:
    """
    Canonical comparison form of an exercise name.

    - lowercase
    - "&" becomes the word "and"
    - anything outside [a-z0-9] and whitespace becomes a space
    - collapse whitespace runs and trim
    """
    if not text:
        return ""
    t = text.lower().replace("&", "and")
    t = _NON_ALNUM.sub(" ", t)
    t = _WHITESPACE.sub(" ", t)
    return t.strip()
