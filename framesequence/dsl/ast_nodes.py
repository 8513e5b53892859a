"""AST node definitions for frame sequence strings.

These frozen dataclasses form the tree produced by the parser, one class
per grammar rule:

    FrameSequence
      -> parts (FrameSequencePart = FrameRange | Frame)
          FrameRange
            -> left, right (Frame)
            -> step (PositiveNumber | BinarySequenceSymbol | None)

Every node records the 0-based offset of its first character in the source.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Frame:
    """A single signed frame literal such as `-12`."""

    value: int
    position: int = 0


@dataclass(frozen=True)
class PositiveNumber:
    """A step size after `@`; always greater than zero."""

    value: int
    position: int = 0


@dataclass(frozen=True)
class BinarySequenceSymbol:
    """The `b` after `@`, selecting binary subdivision order."""

    position: int = 0


Step = PositiveNumber | BinarySequenceSymbol


@dataclass(frozen=True)
class FrameRange:
    """A `left-right` range with an optional `@step` suffix."""

    left: Frame
    right: Frame
    step: Step | None = None
    position: int = 0

    @property
    def is_binary(self) -> bool:
        return isinstance(self.step, BinarySequenceSymbol)

    def __str__(self) -> str:
        text = f"{self.left.value}-{self.right.value}"
        if isinstance(self.step, PositiveNumber):
            text += f"@{self.step.value}"
        elif isinstance(self.step, BinarySequenceSymbol):
            text += "@b"
        return text


# One comma-separated element of the sequence
FrameSequencePart = FrameRange | Frame


@dataclass(frozen=True)
class FrameSequence:
    """Root of the AST: the comma-separated parts of one input string."""

    parts: tuple[FrameSequencePart, ...] = ()
    source: str = ""
