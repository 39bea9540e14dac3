from __future__ import annotations

import pytest

from healthsvc.info import CommandErrorInfoItem, ErrorInfoItem, InfoItem


def test_command_error_splits_stderr_into_lines() -> None:
    item = CommandErrorInfoItem("ok", "line1\nline2\n")
    assert item.info == "ok"
    assert item.stderr == ("line1", "line2")


def test_command_error_trims_whole_stream_only() -> None:
    item = CommandErrorInfoItem("", "\n  first\n\nlast  \n")
    assert item.stderr == ("first", "", "last")


def test_command_error_with_empty_stderr() -> None:
    assert CommandErrorInfoItem("out", "   \n").stderr == ()
    assert CommandErrorInfoItem("out").stderr == ()


def test_info_items_serialize() -> None:
    assert InfoItem("disk ok").to_dict() == {"info": "disk ok"}
    assert CommandErrorInfoItem("", "boom\n").to_dict() == {"info": "", "stderr": ["boom"]}
    assert ErrorInfoItem("probe failed").to_dict() == {"message": "probe failed"}


def test_error_info_item_does_not_share_info_fields() -> None:
    item = ErrorInfoItem("probe failed")
    assert item.message == "probe failed"
    assert not isinstance(item, InfoItem)
    assert not hasattr(item, "info")


def test_info_items_are_immutable() -> None:
    item = CommandErrorInfoItem("out", "err")
    with pytest.raises(AttributeError):
        item.stderr = ("other",)  # type: ignore[misc]
