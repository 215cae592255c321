from __future__ import annotations

import re
from collections.abc import Mapping

DEFAULT_MESSAGES: dict[str, str] = {
    "simplesort-err": "Unrecognized option: $1",
    "simplesort-err-keyed": (
        "Keyed sort needs $1 keys but the second list has only $2"
    ),
}

_PARAM_RE = re.compile(r"\$(\d+)")


class MessageTable:
    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._messages = DEFAULT_MESSAGES.copy()
        if overrides:
            self._messages.update(overrides)

    def text(self, key: str, *params: object) -> str:
        template = self._messages.get(key)
        if template is None:
            return f"⧼{key}⧽"

        def substitute(match: re.Match[str]) -> str:
            index = int(match.group(1)) - 1
            if 0 <= index < len(params):
                return str(params[index])
            return match.group(0)

        return _PARAM_RE.sub(substitute, template)
