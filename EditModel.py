"""Value types shared by the paste/cut planners and the document hosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Sequence


@dataclass(frozen=True, order=True)
class Position:
	line: int
	char: int


@dataclass(frozen=True)
class Range:
	start: Position
	end: Position

	@property
	def is_empty(self) -> bool:
		return self.start == self.end


@dataclass(frozen=True)
class Selection(Range):
	"""Normalized selection: start is never after end."""

	@property
	def spans_single_line_break(self) -> bool:
		"""Selection ends at column 0 of the line right after its start line."""
		return self.end.line == self.start.line + 1 and self.end.char == 0

	@classmethod
	def caret(cls, line: int, char: int) -> "Selection":
		pos = Position(line, char)
		return cls(pos, pos)


@dataclass(frozen=True)
class TextEdit:
	range: Range
	new_text: str = ""


@dataclass(frozen=True)
class EditPlan:
	"""One paste: delete delete_range, insert insert_text at its start."""

	delete_range: Range
	insert_text: str
	result_cursor: Position

	@property
	def insert_position(self) -> Position:
		return self.delete_range.start

	def edits(self) -> List[TextEdit]:
		return [TextEdit(self.delete_range, self.insert_text)]


@dataclass(frozen=True)
class CutPlan:
	"""One cut: the removed text plus the dedent of its orphaned block."""

	cut_text: str
	delete_range: Range
	dedent_edits: List[TextEdit] = field(default_factory=list)

	@property
	def result_cursor(self) -> Position:
		return self.delete_range.start

	def edits(self) -> List[TextEdit]:
		return [TextEdit(self.delete_range, "")] + list(self.dedent_edits)


class DocumentHost(Protocol):
	"""What the paste/cut commands need from an editor."""

	def indent_unit(self) -> str: ...

	def is_target_language(self) -> bool: ...

	def line_count(self) -> int: ...

	def line_text(self, line: int) -> str: ...

	def selection(self) -> Selection: ...

	def read_clipboard_text(self) -> str: ...

	def write_clipboard_text(self, text: str) -> None: ...

	def apply_edit(self, edits: Sequence[TextEdit]) -> bool: ...

	def set_cursor(self, position: Position) -> None: ...
