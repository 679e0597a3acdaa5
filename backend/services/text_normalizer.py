"""Typography cleanup applied to a posting before any pattern runs."""

import re

# Typographic characters that break ASCII patterns
_TRANSLATION = str.maketrans({
    "\u2013": "-",  # en dash
    "\u2014": "-",  # em dash
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
})

# Whitespace runs that do not contain a newline
_INLINE_WS_RE = re.compile(r"[^\S\n]+")
_NEWLINE_PADDING_RE = re.compile(r" *\n *")


def normalize(text: str) -> str:
    """Return posting text with ASCII punctuation and tidy whitespace.

    Inline whitespace collapses to a single space but line breaks are kept,
    since the section scanner works line by line.
    """
    if not text:
        return ""
    text = text.translate(_TRANSLATION)
    text = _INLINE_WS_RE.sub(" ", text)
    text = _NEWLINE_PADDING_RE.sub("\n", text)
    return text.strip()
