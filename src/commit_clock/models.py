"""Data models for commit-clock."""

from __future__ import annotations

from dataclasses import dataclass, field

BUCKETS = ("dawn", "daybreak", "morning", "daytime", "evening", "night")


@dataclass(frozen=True)
class Viewer:
    username: str
    id: str


@dataclass(frozen=True)
class RepositoryRef:
    name: str
    owner: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass
class BucketCounts:
    dawn: int = 0
    daybreak: int = 0
    morning: int = 0
    daytime: int = 0
    evening: int = 0
    night: int = 0

    def increment(self, bucket: str) -> None:
        if bucket not in BUCKETS:
            raise ValueError(f"Unknown bucket: {bucket!r}")
        setattr(self, bucket, getattr(self, bucket) + 1)

    @property
    def total(self) -> int:
        return sum(getattr(self, b) for b in BUCKETS)

    @property
    def active_total(self) -> int:
        """Commits made between 08:00 and 24:00."""
        return self.morning + self.daytime + self.evening + self.night

    def as_dict(self) -> dict[str, int]:
        return {b: getattr(self, b) for b in BUCKETS}


@dataclass
class ReportLine:
    label: str
    commits: int
    bar: str
    percent: float

    def format(self) -> str:
        return " ".join([
            self.label.ljust(10),
            f"{self.commits:>5} commits".ljust(14),
            self.bar,
            f"{self.percent:5.1f}%",
        ])


@dataclass
class Report:
    title: str
    counts: BucketCounts
    lines: list[ReportLine] = field(default_factory=list)

    @property
    def content(self) -> str:
        return "\n".join(line.format() for line in self.lines)
