"""IndentPad – launcher."""

import logging
import sys
from pathlib import Path

from PyQt5.QtWidgets import QApplication

from CodeEditor import CodeEditor
from Settings import SETTINGS_PATH, load_settings


def run() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=str(settings.get("log_level", "WARNING")).upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    app = QApplication(sys.argv)
    file_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    editor = CodeEditor(settings, file_path, SETTINGS_PATH)
    if file_path is not None and file_path.exists():
        with open(file_path, "r", encoding="utf-8") as fh:
            editor.setPlainText(fh.read())
    editor.setWindowTitle(f"IndentPad — {file_path.name}" if file_path else "IndentPad")
    editor.resize(900, 650)
    editor.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    run()
