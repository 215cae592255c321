from __future__ import annotations

from simplesort.messages import MessageTable


def test_parameters_are_substituted() -> None:
    table = MessageTable()
    assert table.text("simplesort-err", "foo") == "Unrecognized option: foo"


def test_missing_key_renders_placeholder() -> None:
    assert MessageTable().text("no-such-message") == "⧼no-such-message⧽"


def test_missing_parameter_is_left_in_place() -> None:
    table = MessageTable({"custom": "$1 and $2"})
    assert table.text("custom", "one") == "one and $2"
