"""Turn clipboard text into a single re-indented paste edit.

The planner only reads from the host; applying the edit is left to
ClipboardCommands so that a paste stays one atomic document change.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from EditModel import DocumentHost, EditPlan, Position, Range, Selection
from EditorLogic import (
	code_part,
	detect_line_separator,
	guess_source_indent_unit,
	has_lost_indentation,
	indent_length,
	normalize_indent_unit,
	reindent_lines,
	strip_repl_prompts,
)

logger = logging.getLogger(__name__)


def compute_base_level(
	selection: Selection,
	current_line: str,
	previous_line: Optional[str],
	indent_unit: str,
) -> int:
	"""Indent level the first pasted line is anchored at."""
	unit_len = len(indent_unit)
	indent = indent_length(current_line)
	char = selection.start.char

	if selection.is_empty and indent > 0 and indent % unit_len == 0:
		return indent // unit_len
	if not selection.is_empty and char == 0:
		return indent // unit_len
	# Mid-indentation or mid-token: fall back to the line's own indent.
	if char % unit_len != 0:
		return indent // unit_len
	if char > 0:
		return char // unit_len

	if previous_line is None or not previous_line.strip():
		return 0
	level = indent_length(previous_line) // unit_len
	if code_part(previous_line).endswith(":"):
		level += 1
	return level


def prepare_paste_lines(
	text: str,
	indent_unit: str,
	base_level: int,
	strip_prompts: bool = True,
) -> Optional[List[str]]:
	"""Clean, normalize and re-indent clipboard text; None if there is nothing to paste."""
	if not text.strip():
		return None
	sep = detect_line_separator(text)
	if strip_prompts:
		text = strip_repl_prompts(text, sep)

	lines = [line.rstrip() for line in text.rstrip().split(sep)]
	while lines and not lines[0].strip():
		lines.pop(0)
	if not lines:
		return None

	source_unit = guess_source_indent_unit(lines, indent_unit)
	lines = normalize_indent_unit(lines, source_unit, indent_unit)
	lost = has_lost_indentation(lines)
	logger.debug(
		f"Re-indenting {len(lines)} line(s) at level {base_level}"
		f" (source unit {source_unit!r}, lost indentation: {lost})"
	)
	return reindent_lines(lines, base_level, indent_unit, lost)


def _end_of_insert(start: Position, inserted: str, sep: str) -> Position:
	parts = inserted.split(sep)
	if len(parts) == 1:
		return Position(start.line, start.char + len(parts[0]))
	return Position(start.line + len(parts) - 1, len(parts[-1]))


def plan_paste_edit(
	selection: Selection,
	start_line_text: str,
	end_line_text: str,
	new_lines: Sequence[str],
	sep: str = "\n",
) -> EditPlan:
	"""Decide what to delete and where the re-indented lines go.

	Whitespace around the selection is folded into the deletion so the
	original indentation is not doubled. A selection covering exactly one
	line break replaces a whole line and keeps its trailing separator.
	"""
	start, end = selection.start, selection.end
	full_line = selection.spans_single_line_break

	if not full_line and not end_line_text[end.char:].strip():
		end = Position(end.line, len(end_line_text))

	if not start_line_text[: start.char].strip():
		single_line = start.line == end.line
		reaches_eol = single_line and end.char >= len(end_line_text)
		if selection.is_empty or not single_line or reaches_eol:
			start = Position(start.line, 0)

	lines = list(new_lines)
	if start.char > 0 and lines:
		# Inline paste: the text before the cursor already provides the indent.
		lines[0] = lines[0].lstrip()
	insert_text = sep.join(lines)
	if full_line:
		insert_text += sep

	return EditPlan(
		delete_range=Range(start, end),
		insert_text=insert_text,
		result_cursor=_end_of_insert(start, insert_text, sep),
	)


def plan_paste(host: DocumentHost, text: str, strip_prompts: bool = True) -> Optional[EditPlan]:
	"""Plan a paste of text into host at its current selection."""
	indent_unit = host.indent_unit()
	selection = host.selection()
	line = selection.start.line
	current_line = host.line_text(line)
	previous_line = host.line_text(line - 1) if line > 0 else None

	base_level = compute_base_level(selection, current_line, previous_line, indent_unit)
	new_lines = prepare_paste_lines(text, indent_unit, base_level, strip_prompts)
	if new_lines is None:
		return None
	return plan_paste_edit(
		selection,
		current_line,
		host.line_text(selection.end.line),
		new_lines,
		detect_line_separator(text),
	)
