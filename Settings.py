"""IndentPad settings stored as JSON in the user's home directory."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from EditorLogic import resolve_indent_unit

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path.home() / ".indentpad.json"

DEFAULT_SETTINGS: Dict[str, Any] = {
	"tab_size": 4,
	"insert_spaces": True,
	"file_extensions": [".py", ".pyw"],
	"strip_repl_prompts": True,
	"log_level": "WARNING",
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
	"""Load settings from disk, filling in defaults for missing keys."""
	path = path or SETTINGS_PATH
	settings = json.loads(json.dumps(DEFAULT_SETTINGS))
	if not path.exists():
		return settings
	try:
		with open(path, "r", encoding="utf-8") as fh:
			data = json.load(fh)
	except (OSError, json.JSONDecodeError) as e:
		logger.warning(f"Could not load settings from {path}: {e}")
		return settings
	if not isinstance(data, dict):
		logger.warning(f"Settings file {path} is not a JSON object, ignoring")
		return settings
	settings.update(data)
	return settings


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> bool:
	path = path or SETTINGS_PATH
	try:
		with open(path, "w", encoding="utf-8") as fh:
			json.dump(settings, fh, indent=2)
	except (OSError, TypeError, ValueError) as e:
		logger.warning(f"Could not save settings to {path}: {e}")
		return False
	return True


def indent_unit_for(settings: Dict[str, Any]) -> str:
	try:
		tab_size = int(settings.get("tab_size", DEFAULT_SETTINGS["tab_size"]))
	except (TypeError, ValueError):
		logger.warning(f"Invalid tab_size {settings.get('tab_size')!r}, using default")
		tab_size = DEFAULT_SETTINGS["tab_size"]
	return resolve_indent_unit(tab_size, bool(settings.get("insert_spaces", True)))


def is_target_file(settings: Dict[str, Any], file_path: Optional[Union[str, Path]]) -> bool:
	"""Untitled buffers count as Python; saved files are matched by extension."""
	if file_path is None:
		return True
	extensions = settings.get("file_extensions", DEFAULT_SETTINGS["file_extensions"])
	return Path(file_path).suffix.lower() in {ext.lower() for ext in extensions}
