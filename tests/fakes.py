# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FakeBlobStorage:
    """
    In-memory BlobStorage used by store tests.

    - Starts from an optional pre-stored blob
    - Records every save() call for assertions
    """

    blob: str | None = None
    saves: list[str] = field(default_factory=list)
    loads: int = 0

    def load(self) -> str | None:
        self.loads += 1
        return self.blob

    def save(self, blob: str) -> None:
        self.saves.append(blob)
        self.blob = blob


class FakeClock:
    """Deterministic clock (seconds since epoch); does not move unless told to."""

    def __init__(self, now: float = 1_760_000_000.5) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
