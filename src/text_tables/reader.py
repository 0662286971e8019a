"""Line-oriented document access used by the locators.

The host's text buffer is exposed to the engine only through the LineReader
contract.  StringLineReader adapts a plain string so the engine can be used
(and tested) without any editor in the loop.
"""

from typing import Protocol

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    """Zero-based line/character coordinate in a document."""

    model_config = ConfigDict(frozen=True)

    line: int
    character: int


class Range(BaseModel):
    """Span between two positions, end inclusive of the last line's text."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position


class TextLine(BaseModel):
    """One document line as seen by a locator."""

    model_config = ConfigDict(frozen=True)

    text: str
    first_non_whitespace_character_index: int
    range: Range


class LineReader(Protocol):
    """Read-only, line-indexed view of a document."""

    @property
    def line_count(self) -> int:
        """Number of lines in the document."""

    def line_at(self, index: int) -> TextLine:
        """Return line *index* (0-based)."""


class StringLineReader:
    """LineReader over an in-memory string, split on '\\n'.

    A CRLF document keeps a trailing '\\r' on each line; ``reformat_text`` normalises
    line endings before reading.
    """

    def __init__(self, text: str):
        self._lines = text.split("\n")

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> TextLine:
        if index < 0 or index >= len(self._lines):
            raise IndexError(f"Line {index} out of range for document with {len(self._lines)} lines")
        text = self._lines[index]
        # An all-whitespace line reports its full length
        first = len(text) - len(text.lstrip())
        return TextLine(
            text=text,
            first_non_whitespace_character_index=first,
            range=Range(start=Position(line=index, character=0), end=Position(line=index, character=len(text))),
        )
