"""In-memory connection sources."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class HeaderMapSource:
    """IConnectionSource over a plain header mapping.

    Used where no live connection exists (CLI, scripted lookups, tests).
    """

    headers: dict[str, str | bytes] = field(default_factory=dict)
    addr: str | None = None

    def get_header(self, name: str) -> str | bytes | None:
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    @property
    def remote_addr(self) -> str | None:
        return self.addr
