from __future__ import annotations

import re

# Whitespace as PCRE ``\s`` sees it; NBSP and other Unicode spaces are data.
ASCII_WHITESPACE = " \t\n\r\x0b\x0c"

_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)


def string_to_array(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, discarding whitespace around it.

    The separator is a literal string. An empty separator removes all
    whitespace and yields one token per remaining character. The text is
    trimmed first, so a whitespace separator never yields a leading or
    trailing blank element.
    """
    if separator == "":
        return list(_WHITESPACE_RE.sub("", text))
    pattern = re.compile(r"\s*" + re.escape(separator) + r"\s*", re.ASCII)
    return pattern.split(text.strip(ASCII_WHITESPACE))
