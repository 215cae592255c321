from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce

from .tokenizer import ASCII_WHITESPACE

log = logging.getLogger(__name__)

_INSEP_RE = re.compile(r'insep="([^"]*)"')
_OUTSEP_RE = re.compile(r'outsep="([^"]*)"')
_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)

# Six keyword slots, one more than a sane option string needs, so trailing
# debris lands in its own token and gets rejected.
_MAX_OPTION_TOKENS = 6


class OrderMode(Enum):
    NATURAL = "natural"
    ALPHABETIC = "alpha"
    NUMERIC = "num"


class UnrecognizedOptionError(ValueError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unrecognized option: {token!r}")
        self.token = token


@dataclass(frozen=True)
class SortOptions:
    ascending: bool = True
    order: OrderMode = OrderMode.NATURAL
    case_sensitive: bool = False
    input_separator: str = ","
    output_separator: str | None = None
    keyed: bool = False
    stop_on_blank: bool = False

    def __post_init__(self) -> None:
        if self.output_separator is None:
            object.__setattr__(self, "output_separator", self.input_separator)


_KEYWORDS: dict[str, dict[str, object]] = {
    "desc": {"ascending": False},
    "alpha": {"order": OrderMode.ALPHABETIC},
    "num": {"order": OrderMode.NUMERIC},
    "case": {"case_sensitive": True},
    "keyed": {"keyed": True},
    "stoponblank": {"stop_on_blank": True},
}


def _extract_separator(pattern: re.Pattern[str], text: str) -> tuple[str | None, str]:
    match = pattern.search(text)
    if match is None:
        return None, text
    return match.group(1), text.replace(match.group(0), "")


def _apply_keyword(options: SortOptions, token: str) -> SortOptions:
    if not token:
        return options
    changes = _KEYWORDS.get(token)
    if changes is None:
        log.warning("Rejecting unrecognized sort option %r", token)
        raise UnrecognizedOptionError(token)
    return replace(options, **changes)


def split_option_tokens(text: str) -> list[str]:
    stripped = text.strip(ASCII_WHITESPACE)
    if not stripped:
        return []
    return _WHITESPACE_RE.split(stripped, maxsplit=_MAX_OPTION_TOKENS - 1)


def parse_options(text: str) -> SortOptions:
    """Parse an option string such as ``desc num insep=";"``.

    Separators are pulled out first because their quoted values may hold
    whitespace. Keywords are then folded left to right into a fresh
    ``SortOptions``, so for ``alpha`` and ``num`` the later one wins.
    Raises ``UnrecognizedOptionError`` on the first unknown keyword.
    """
    insep, remainder = _extract_separator(_INSEP_RE, text)
    outsep, remainder = _extract_separator(_OUTSEP_RE, remainder)

    input_separator = "," if insep is None else insep
    output_separator = input_separator if outsep is None else outsep
    base = SortOptions(
        input_separator=input_separator, output_separator=output_separator
    )

    options = reduce(_apply_keyword, split_option_tokens(remainder), base)
    log.debug("Parsed sort options %r into %s", text, options)
    return options
