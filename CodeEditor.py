import logging
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont, QKeySequence, QTextCursor
from PyQt5.QtWidgets import QApplication, QMenu, QPlainTextEdit

from ClipboardCommands import cut_from, paste_into, paste_text
from EditModel import Position, Range, Selection, TextEdit
from EditorLogic import compute_newline_with_indentation, unindent_line
from Settings import DEFAULT_SETTINGS, indent_unit_for, is_target_file, save_settings

logger = logging.getLogger(__name__)


class CodeEditor(QPlainTextEdit):
	"""QPlainTextEdit with indentation-aware paste and cut for Python."""

	def __init__(
		self,
		settings: Optional[Dict[str, Any]] = None,
		file_path: Optional[Path] = None,
		settings_path: Optional[Path] = None,
	) -> None:
		super().__init__()
		font = QFont("Consolas", 11)
		font.setStyleHint(QFont.StyleHint.Monospace)
		self.setFont(font)
		self._settings = dict(settings or DEFAULT_SETTINGS)
		# Без пути настройки не сохраняются (например, в тестах)
		self._settings_path = settings_path
		self.file_path = file_path
		self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)

	@property
	def settings(self) -> Dict[str, Any]:
		return self._settings

	# DocumentHost

	def indent_unit(self) -> str:
		return indent_unit_for(self._settings)

	def is_target_language(self) -> bool:
		return is_target_file(self._settings, self.file_path)

	def line_count(self) -> int:
		return self.document().blockCount()

	def line_text(self, line: int) -> str:
		return self.document().findBlockByNumber(line).text()

	def selection(self) -> Selection:
		cursor = self.textCursor()
		return Selection(self._position_at(cursor.selectionStart()), self._position_at(cursor.selectionEnd()))

	def read_clipboard_text(self) -> str:
		return QApplication.clipboard().text()

	def write_clipboard_text(self, text: str) -> None:
		QApplication.clipboard().setText(text)

	def apply_edit(self, edits: Sequence[TextEdit]) -> bool:
		"""Apply edits bottom-up inside one undo block."""
		if self.isReadOnly():
			return False
		cursor = QTextCursor(self.document())
		cursor.beginEditBlock()
		for edit in sorted(edits, key=lambda e: (e.range.start, e.range.end), reverse=True):
			cursor.setPosition(self._offset_of(edit.range.start))
			cursor.setPosition(self._offset_of(edit.range.end), QTextCursor.MoveMode.KeepAnchor)
			cursor.insertText(edit.new_text.replace("\r\n", "\n"))
		cursor.endEditBlock()
		return True

	def set_cursor(self, position: Position) -> None:
		cursor = self.textCursor()
		cursor.setPosition(self._offset_of(position))
		self.setTextCursor(cursor)

	def _position_at(self, offset: int) -> Position:
		block = self.document().findBlock(offset)
		return Position(block.blockNumber(), offset - block.position())

	def _offset_of(self, position: Position) -> int:
		block = self.document().findBlockByNumber(position.line)
		return block.position() + min(position.char, block.length() - 1)

	# Commands

	def _strip_prompts(self) -> bool:
		return bool(self._settings.get("strip_repl_prompts", True))

	def smart_paste(self) -> bool:
		return paste_into(self, self._strip_prompts())

	def smart_cut(self) -> bool:
		return cut_from(self)

	def insertFromMimeData(self, source):  # type: ignore[override]
		# Every Qt paste path (shortcut, context menu, paste() slot, drop) ends here.
		if self.is_target_language() and source.hasText():
			paste_text(self, source.text(), self._strip_prompts())
			return
		super().insertFromMimeData(source)

	def cut(self) -> None:  # type: ignore[override]
		if self.is_target_language():
			self.smart_cut()
			return
		super().cut()

	def contextMenuEvent(self, event):  # type: ignore[override]
		menu = self.createStandardContextMenu()
		self._install_smart_actions(menu)
		menu.exec_(event.globalPos())
		menu.deleteLater()

	def _install_smart_actions(self, menu: QMenu) -> None:
		"""Route the standard menu's Cut to smart_cut; Paste already goes through insertFromMimeData."""
		if not self.is_target_language():
			return
		for action in menu.actions():
			if action.objectName() == "edit-cut":
				action.triggered.disconnect()
				action.triggered.connect(self.smart_cut)

	def closeEvent(self, event):  # type: ignore[override]
		if self._settings_path is not None:
			save_settings(self._settings, self._settings_path)
		super().closeEvent(event)

	def keyPressEvent(self, event):
		key = event.key()

		# Приоритет 1: вырезание с восстановлением отступов (вставка идёт через insertFromMimeData)
		if self.is_target_language() and event.matches(QKeySequence.StandardKey.Cut):
			self.smart_cut()
			return

		# Приоритет 2: Enter / Return — автоотступ
		if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
			self._insert_auto_indentation()
			return

		# Приоритет 3: Tab / Shift+Tab — управление отступами
		if key == Qt.Key.Key_Tab:
			self.textCursor().insertText(self.indent_unit())
			return
		elif key == Qt.Key.Key_Backtab:
			self._unindent_selection()
			return

		super().keyPressEvent(event)

	def _insert_auto_indentation(self) -> None:
		cursor = self.textCursor()
		cursor.beginEditBlock()
		current_text = cursor.block().text()[: cursor.positionInBlock()]
		newline_with_indent = compute_newline_with_indentation(current_text, self.indent_unit())
		cursor.removeSelectedText()
		cursor.insertText(newline_with_indent)
		cursor.endEditBlock()
		self.setTextCursor(cursor)

	def _unindent_selection(self) -> None:
		selection = self.selection()
		unit = self.indent_unit()
		last = selection.end.line
		if last > selection.start.line and selection.end.char == 0:
			last -= 1
		edits = []
		for line in range(selection.start.line, last + 1):
			text = self.line_text(line)
			removed = len(text) - len(unindent_line(text, unit))
			if removed:
				edits.append(TextEdit(Range(Position(line, 0), Position(line, removed))))
		if edits and not self.apply_edit(edits):
			logger.warning("Unindent edit was rejected")
