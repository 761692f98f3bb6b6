"""Paste and cut commands run against any DocumentHost."""

from __future__ import annotations

import logging

from CutPlanner import plan_cut
from EditModel import DocumentHost
from PastePlanner import plan_paste

logger = logging.getLogger(__name__)


def paste_text(host: DocumentHost, text: str, strip_prompts: bool = True) -> bool:
	"""Paste text with reconstructed indentation.

	Returns True if the document was changed.
	"""
	if not host.is_target_language():
		logger.debug("Paste skipped: not a target document")
		return False
	plan = plan_paste(host, text, strip_prompts)
	if plan is None:
		logger.debug("Paste skipped: clipboard is empty")
		return False
	if not host.apply_edit(plan.edits()):
		logger.warning("Paste edit was rejected by the editor")
		return False
	host.set_cursor(plan.result_cursor)
	return True


def paste_into(host: DocumentHost, strip_prompts: bool = True) -> bool:
	"""Paste the host clipboard."""
	if not host.is_target_language():
		logger.debug("Paste skipped: not a target document")
		return False
	return paste_text(host, host.read_clipboard_text(), strip_prompts)


def cut_from(host: DocumentHost) -> bool:
	"""Cut the selection, dedenting the block under a removed block header."""
	if not host.is_target_language():
		logger.debug("Cut skipped: not a target document")
		return False
	plan = plan_cut(host)
	if plan is None:
		logger.debug("Cut skipped: selection is empty")
		return False
	if not host.apply_edit(plan.edits()):
		logger.warning("Cut edit was rejected by the editor")
		return False
	# Clipboard is only touched once the document edit went through.
	host.write_clipboard_text(plan.cut_text)
	host.set_cursor(plan.result_cursor)
	return True
