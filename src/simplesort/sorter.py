from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .config import SimplesortConfig
from .messages import MessageTable
from .natural import natural_key
from .options import OrderMode, SortOptions, UnrecognizedOptionError, parse_options
from .tokenizer import string_to_array

log = logging.getLogger(__name__)

_NUMERIC_PREFIX_RE = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class KeyedListMismatchError(IndexError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"keyed sort needs {expected} keys, second list has {actual}"
        )
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class NoList:
    pass


@dataclass(frozen=True)
class ListOnly:
    text: str


@dataclass(frozen=True)
class OptionsAndList:
    options: str
    text: str


@dataclass(frozen=True)
class OptionsAndKeyedLists:
    options: str
    text: str
    keys: str


SortRequest = NoList | ListOnly | OptionsAndList | OptionsAndKeyedLists


@dataclass
class SortResult:
    output: str
    error: str | None = None
    noparse: bool = False

    @property
    def text(self) -> str:
        return self.error if self.error is not None else self.output


def request_from_args(args: Sequence[str]) -> SortRequest:
    """Map raw template arguments (parser context excluded) to a request."""
    if not args:
        return NoList()
    if len(args) == 1:
        return ListOnly(args[0])
    if len(args) == 2:
        return OptionsAndList(args[0], args[1])
    return OptionsAndKeyedLists(args[0], args[1], args[2])


def numeric_value(token: str) -> float:
    match = _NUMERIC_PREFIX_RE.match(token)
    if match is None:
        return 0.0
    return float(match.group(0))


def _sort_key(options: SortOptions) -> Callable[[str], Any]:
    if options.order is OrderMode.NUMERIC:
        return numeric_value
    if options.order is OrderMode.ALPHABETIC:
        if options.case_sensitive:
            return str
        return str.lower
    return lambda token: natural_key(token, case_sensitive=options.case_sensitive)


def sort_permutation(tokens: Sequence[str], options: SortOptions) -> list[int]:
    """Return the indices of ``tokens`` in sorted order.

    Python's sort is stable in both directions, so ``reverse=True`` acts as
    a negated comparator: equal tokens keep their input order either way.
    """
    key = _sort_key(options)
    return sorted(
        range(len(tokens)),
        key=lambda index: key(tokens[index]),
        reverse=not options.ascending,
    )


def sort_tokens(tokens: Sequence[str], options: SortOptions) -> list[str]:
    return [tokens[index] for index in sort_permutation(tokens, options)]


def keyed_sort(
    tokens: Sequence[str], keys: Sequence[str] | None, options: SortOptions
) -> list[str]:
    """Reorder ``keys`` by the permutation that sorts ``tokens``."""
    keys = keys or []
    if len(keys) < len(tokens):
        raise KeyedListMismatchError(len(tokens), len(keys))
    return [keys[index] for index in sort_permutation(tokens, options)]


def truncate_at_blank(tokens: list[str]) -> list[str]:
    try:
        return tokens[: tokens.index("")]
    except ValueError:
        return tokens


class ListSorter:
    def __init__(self, config: SimplesortConfig | None = None) -> None:
        self.config = config or SimplesortConfig()
        self.messages: MessageTable = self.config.message_table()

    def sort(self, request: SortRequest) -> SortResult:
        if isinstance(request, NoList):
            return SortResult(output="")

        options_text = "" if isinstance(request, ListOnly) else request.options
        try:
            options = parse_options(options_text)
        except UnrecognizedOptionError as exc:
            return SortResult(
                output="", error=self.messages.text("simplesort-err", exc.token)
            )

        if request.text == "":
            return SortResult(output="")

        tokens = string_to_array(request.text, options.input_separator)
        log.debug("Tokenized %d elements", len(tokens))
        if options.stop_on_blank:
            truncated = truncate_at_blank(tokens)
            if len(truncated) != len(tokens):
                log.debug("Truncated list at blank element %d", len(truncated))
            tokens = truncated

        if options.keyed:
            keys = None
            if isinstance(request, OptionsAndKeyedLists):
                keys = string_to_array(request.keys, options.input_separator)
            try:
                ordered = keyed_sort(tokens, keys, options)
            except KeyedListMismatchError as exc:
                log.warning("%s", exc)
                return SortResult(
                    output="",
                    error=self.messages.text(
                        "simplesort-err-keyed", exc.expected, exc.actual
                    ),
                )
        else:
            ordered = sort_tokens(tokens, options)

        log.debug(
            "Sorted %d elements (%s, ascending=%s)",
            len(ordered),
            options.order.value,
            options.ascending,
        )
        return SortResult(output=options.output_separator.join(ordered))


def render_sort(parser: object, *args: str) -> str:
    """Entry point for ``{{#simplesort:}}``; ``parser`` is the host context."""
    del parser
    return ListSorter().sort(request_from_args(args)).text
