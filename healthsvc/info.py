"""Diagnostic detail attached to a status report."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union


@dataclass(frozen=True)
class InfoItem:
    """Free-form diagnostic text, typically the stdout of a probe."""

    info: str

    def to_dict(self) -> Dict[str, Any]:
        return {"info": self.info}


@dataclass(frozen=True, init=False)
class CommandErrorInfoItem(InfoItem):
    """Captured output of a failed command probe.

    ``stderr`` is trimmed and split on newlines, so ``"a\\nb\\n"`` is stored
    as ``("a", "b")``.
    """

    stderr: Tuple[str, ...] = field(default=())

    def __init__(self, info: str, stderr: str = "") -> None:
        object.__setattr__(self, "info", info)
        trimmed = stderr.strip()
        object.__setattr__(self, "stderr", tuple(trimmed.split("\n")) if trimmed else ())

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["stderr"] = list(self.stderr)
        return data


@dataclass(frozen=True)
class ErrorInfoItem:
    """A single error message; shares the to_dict() shape, not the fields."""

    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


AnyInfoItem = Union[InfoItem, ErrorInfoItem]
