"""In-memory DocumentHost: a list of lines, a selection and a clipboard string."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from EditModel import Position, Range, Selection, TextEdit
from EditorLogic import DEFAULT_INDENT

_LINE_BREAK = re.compile(r"\r\n|\n")


class MemoryDocument:
	"""Plain-text document implementing the DocumentHost protocol."""

	def __init__(
		self,
		text: str = "",
		selection: Optional[Selection] = None,
		indent_unit: str = DEFAULT_INDENT,
		clipboard: str = "",
		target_language: bool = True,
	) -> None:
		self.lines: List[str] = _LINE_BREAK.split(text)
		self._selection = selection or Selection.caret(0, 0)
		self._indent_unit = indent_unit
		self.clipboard = clipboard
		self.target_language = target_language
		self.read_only = False

	@property
	def text(self) -> str:
		return "\n".join(self.lines)

	def indent_unit(self) -> str:
		return self._indent_unit

	def is_target_language(self) -> bool:
		return self.target_language

	def line_count(self) -> int:
		return len(self.lines)

	def line_text(self, line: int) -> str:
		return self.lines[line]

	def selection(self) -> Selection:
		return self._selection

	def select(self, start: Position, end: Position) -> None:
		self._selection = Selection(min(start, end), max(start, end))

	def read_clipboard_text(self) -> str:
		return self.clipboard

	def write_clipboard_text(self, text: str) -> None:
		self.clipboard = text

	def set_cursor(self, position: Position) -> None:
		self._selection = Selection(position, position)

	def _valid(self, rng: Range) -> bool:
		for pos in (rng.start, rng.end):
			if not 0 <= pos.line < len(self.lines):
				return False
			if not 0 <= pos.char <= len(self.lines[pos.line]):
				return False
		return rng.start <= rng.end

	def apply_edit(self, edits: Sequence[TextEdit]) -> bool:
		"""Apply all edits at once, or none if any is invalid or they overlap."""
		if self.read_only:
			return False
		ordered = sorted(edits, key=lambda edit: (edit.range.start, edit.range.end))
		for edit in ordered:
			if not self._valid(edit.range):
				return False
		for before, after in zip(ordered, ordered[1:]):
			if before.range.end > after.range.start:
				return False

		for edit in reversed(ordered):
			start, end = edit.range.start, edit.range.end
			head = self.lines[start.line][: start.char]
			tail = self.lines[end.line][end.char :]
			new_lines = _LINE_BREAK.split(edit.new_text)
			new_lines[0] = head + new_lines[0]
			new_lines[-1] = new_lines[-1] + tail
			self.lines[start.line : end.line + 1] = new_lines
		return True
