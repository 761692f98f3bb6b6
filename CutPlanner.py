"""Cut with dedent of the block left behind by a removed block header."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from EditModel import CutPlan, DocumentHost, Position, Range, Selection, TextEdit
from EditorLogic import code_part, indent_length, is_comment

logger = logging.getLogger(__name__)

LineLookup = Callable[[int], str]


def extract_text(line_text: LineLookup, rng: Range, sep: str = "\n") -> str:
	"""Text covered by rng, lines joined with sep."""
	start, end = rng.start, rng.end
	if start.line == end.line:
		return line_text(start.line)[start.char : end.char]
	parts = [line_text(start.line)[start.char :]]
	parts.extend(line_text(line) for line in range(start.line + 1, end.line))
	parts.append(line_text(end.line)[: end.char])
	return sep.join(parts)


def is_block_header_cut(selection: Selection, cut_text: str) -> bool:
	"""The cut removes a single line whose code ends with ':'."""
	if selection.is_empty:
		return False
	if selection.start.line != selection.end.line and not selection.spans_single_line_break:
		return False
	stripped = cut_text.strip()
	if not stripped or "\n" in stripped or is_comment(stripped):
		return False
	return code_part(stripped).endswith(":")


def find_dependent_block(
	line_count: int,
	line_text: LineLookup,
	header_line: int,
	indent_unit: str,
) -> List[int]:
	"""Lines after header_line nested deeper than it, blank lines skipped."""
	unit_len = len(indent_unit)
	header_level = indent_length(line_text(header_line)) // unit_len
	block = []
	for line in range(header_line + 1, line_count):
		text = line_text(line)
		if not text.strip():
			continue
		if indent_length(text) // unit_len <= header_level:
			break
		block.append(line)
	return block


def dedent_edits(line_text: LineLookup, lines: List[int], indent_unit: str) -> List[TextEdit]:
	unit_len = len(indent_unit)
	edits = []
	for line in lines:
		if indent_length(line_text(line)) >= unit_len:
			edits.append(TextEdit(Range(Position(line, 0), Position(line, unit_len))))
	return edits


def plan_cut(host: DocumentHost) -> Optional[CutPlan]:
	"""Plan cutting the host's selection; None for an empty selection."""
	selection = host.selection()
	if selection.is_empty:
		return None
	cut_text = extract_text(host.line_text, selection)
	if not is_block_header_cut(selection, cut_text):
		return CutPlan(cut_text=cut_text, delete_range=selection)

	indent_unit = host.indent_unit()
	header_line = selection.start.line
	block = find_dependent_block(host.line_count(), host.line_text, header_line, indent_unit)
	logger.debug(f"Block header cut at line {header_line}: dedenting {len(block)} line(s)")
	return CutPlan(
		cut_text=cut_text,
		delete_range=selection,
		dedent_edits=dedent_edits(host.line_text, block, indent_unit),
	)
