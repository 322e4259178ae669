"""In-memory editing buffer and session."""

from dataclasses import dataclass, field
from typing import Optional, Dict, Tuple
import uuid


@dataclass
class Buffer:
    """
    Text with a point (cursor) and an optional active region.

    The region spans between `mark` and `point` whichever comes first.
    """
    text: str = ""
    point: int = 0
    mark: Optional[int] = None
    region_active: bool = False

    def __post_init__(self):
        self.point = self._clamp(self.point)

    def _clamp(self, position: int) -> int:
        return max(0, min(position, len(self.text)))

    def goto(self, position: int) -> None:
        self.point = self._clamp(position)

    def select(self, start: int, end: int) -> None:
        """Activate the region [start, end) with point at its end."""
        self.mark = self._clamp(start)
        self.point = self._clamp(end)
        self.region_active = True

    def deactivate_region(self) -> None:
        self.region_active = False

    @property
    def has_region(self) -> bool:
        return self.region_active and self.mark is not None

    @property
    def region(self) -> Tuple[int, int]:
        if self.mark is None:
            return (self.point, self.point)
        return (min(self.mark, self.point), max(self.mark, self.point))

    @property
    def region_text(self) -> str:
        start, end = self.region
        return self.text[start:end]

    @property
    def text_before_point(self) -> str:
        return self.text[:self.point]

    def insert(self, text: str) -> None:
        """Insert at point and move point past the insertion."""
        self.text = self.text[:self.point] + text + self.text[self.point:]
        self.point += len(text)

    def delete(self, start: int, end: int) -> None:
        """Delete [start, end) and adjust point and mark."""
        start, end = self._clamp(start), self._clamp(end)
        if start > end:
            start, end = end, start
        self.text = self.text[:start] + self.text[end:]
        self.point = self._shift(self.point, start, end)
        if self.mark is not None:
            self.mark = self._shift(self.mark, start, end)

    @staticmethod
    def _shift(position: int, start: int, end: int) -> int:
        if position >= end:
            return position - (end - start)
        if position > start:
            return start
        return position

    def replace_region(self, replacement: str) -> None:
        """Replace the region with `replacement`, leaving point after it."""
        start, end = self.region
        self.delete(start, end)
        self.point = start
        self.insert(replacement)
        self.mark = start
        self.region_active = False


@dataclass
class Session:
    """
    One editing session: a buffer plus its current content type.

    `active_set` is only ever replaced as a whole, by activation.
    """
    buffer: Buffer = field(default_factory=Buffer)
    content_type: Optional[str] = None
    active_set: Dict[str, str] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def from_text(cls, text: str, point: Optional[int] = None) -> "Session":
        """Create a session over `text` with point at `point` (default: end)."""
        return cls(buffer=Buffer(text=text, point=len(text) if point is None else point))
