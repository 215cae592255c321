from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import SimplesortConfig
from .sorter import (
    ListOnly,
    ListSorter,
    OptionsAndKeyedLists,
    OptionsAndList,
    SortRequest,
)


def _find_project_root(start: Path) -> Path:
    for ancestor in [start, *start.parents]:
        if (ancestor / "pyproject.toml").exists():
            return ancestor
    return start


def _read_list(value: str) -> str:
    if value == "-":
        return sys.stdin.read().strip()
    return value


def _build_request(
    options: str | None, text: str, keys: str | None
) -> SortRequest:
    if options is None:
        return ListOnly(text)
    if keys is None:
        return OptionsAndList(options, text)
    return OptionsAndKeyedLists(options, text, keys)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Sort a delimited list of items."
    )
    parser.add_argument("list", help="The list to sort, or '-' to read stdin")
    parser.add_argument(
        "keys", nargs="?", help="Second list, reordered when 'keyed' is set"
    )
    parser.add_argument(
        "-o",
        "--options",
        help="Sort options, e.g. 'desc num insep=\";\"'",
    )
    parser.add_argument(
        "--root", type=Path, help="Override the project root used for config"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = args.root.resolve() if args.root else _find_project_root(Path.cwd())
    config = SimplesortConfig.load(root)

    options = args.options
    if options is None and config.default_options:
        options = config.default_options

    request = _build_request(options, _read_list(args.list), args.keys)
    result = ListSorter(config).sort(request)
    if result.error is not None:
        print(result.error, file=sys.stderr)
        return 1
    print(result.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
