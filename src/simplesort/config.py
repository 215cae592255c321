from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .messages import DEFAULT_MESSAGES, MessageTable

log = logging.getLogger(__name__)


def _normalize_options(raw: object) -> str:
    if not isinstance(raw, str):
        return ""
    return raw.strip()


def _merge_messages(overrides: dict[str, str] | None) -> dict[str, str]:
    messages = DEFAULT_MESSAGES.copy()
    if overrides:
        for key, value in overrides.items():
            normalized = key.strip().lower()
            if normalized in messages and isinstance(value, str) and value.strip():
                messages[normalized] = value.strip()
    return messages


@dataclass
class SimplesortConfig:
    default_options: str = ""
    messages: dict[str, str] = field(
        default_factory=lambda: DEFAULT_MESSAGES.copy()
    )

    @classmethod
    def load(cls, root: Path) -> SimplesortConfig:
        pyproject = root / "pyproject.toml"
        default_options: object = ""
        messages: dict[str, str] | None = None

        if pyproject.exists():
            with pyproject.open("rb") as handle:
                data = tomllib.load(handle)
            tool_cfg = data.get("tool", {}).get("simplesort", {})
            default_options = tool_cfg.get("default_options", default_options)
            messages = tool_cfg.get("messages")
            log.debug("Loaded [tool.simplesort] from %s", pyproject)

        return cls(
            default_options=_normalize_options(default_options),
            messages=_merge_messages(messages),
        )

    def message_table(self) -> MessageTable:
        return MessageTable(self.messages)
