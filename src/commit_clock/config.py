"""Runtime settings, built once at startup and passed explicitly."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import ConfigError


@dataclass(frozen=True)
class Settings:
    token: str
    gist_id: str | None = None
    timezone: str | None = None

    @property
    def tzinfo(self) -> tzinfo | None:
        """Resolve ``timezone`` to a tzinfo. ``None`` means host local time."""
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Unknown timezone: {self.timezone!r}") from e

    def validate(self, require_gist: bool = True) -> None:
        if not self.token:
            raise ConfigError("A GitHub token is required")
        if require_gist and not self.gist_id:
            raise ConfigError("A gist id is required")
        # Resolve eagerly so a bad timezone fails before any request.
        self.tzinfo
