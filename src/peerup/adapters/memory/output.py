"""In-memory output adapter for testing."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CapturedBox:
    """One report section handed to the output box."""

    title: str
    color: str
    text: str


def _empty_boxes() -> list[CapturedBox]:
    return []


@dataclass
class OutputBoxSpy:
    """Captures report sections instead of drawing them.

    Example:
        >>> spy = OutputBoxSpy()
        >>> spy(title="Components", color="blue", text="  foo")
        >>> spy.titles
        ['Components']
    """

    boxes: list[CapturedBox] = field(default_factory=_empty_boxes)

    def __call__(self, *, title: str, color: str, text: str) -> None:
        self.boxes.append(CapturedBox(title=title, color=color, text=text))

    @property
    def titles(self) -> list[str]:
        return [captured.title for captured in self.boxes]

    def text_of(self, title: str) -> str:
        """Text of the last section with ``title``, empty when never shown."""
        for captured in reversed(self.boxes):
            if captured.title == title:
                return captured.text
        return ""


__all__ = ["CapturedBox", "OutputBoxSpy"]
