"""Health status payloads."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional


def _now() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


@dataclass(frozen=True)
class StatusData:
    """TTL and report time shared by every status payload.

    A TTL of 0 means the status never goes stale. When no report time is
    given the current UTC time is used, e.g. ``2026-10-19T20:20:00+00:00``.
    """

    health_status_ttl: int = 0
    health_status_time: Optional[str] = None

    def __post_init__(self) -> None:
        if self.health_status_ttl < 0:
            raise ValueError(f"health_status_ttl must be >= 0, got {self.health_status_ttl}")
        if self.health_status_time is None:
            object.__setattr__(self, "health_status_time", _now())

    def is_fresh(self, now: Optional[datetime] = None) -> bool:
        if not self.health_status_ttl:
            return True
        reported = datetime.fromisoformat(self.health_status_time)
        if reported.tzinfo is None:
            reported = reported.replace(tzinfo=timezone.utc)
        now = now or datetime.now(timezone.utc)
        return now <= reported + timedelta(seconds=self.health_status_ttl)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "healthStatusTtl": self.health_status_ttl,
            "healthStatusTime": self.health_status_time,
        }


@dataclass(frozen=True)
class HostSanityStatusData(StatusData):
    hostname: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["hostname"] = self.hostname
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HostSanityStatusData":
        """Rebuild a report from its JSON shape."""
        return cls(
            health_status_ttl=int(data.get("healthStatusTtl", 0)),
            health_status_time=data.get("healthStatusTime"),
            hostname=str(data.get("hostname", "")),
        )
