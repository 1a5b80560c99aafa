import json
import os
from typing import Any, Dict
from utils import log_debug, log_warning

DEFAULT_FONT_SIZE = 11


class SettingsManager:
    def __init__(self, main_window=None, settings_file_path: str = "settings.json"):
        self.mw = main_window
        self.settings_file_path = settings_file_path
        self.style_css: Dict[str, str] = {}
        self.file_associations: Dict[str, str] = {}
        self.font_size: int = DEFAULT_FONT_SIZE

    def load_settings(self) -> bool:
        log_debug(f"--> SettingsManager: load_settings from {self.settings_file_path}")
        if not os.path.exists(self.settings_file_path):
            log_debug(f"Settings file '{self.settings_file_path}' not found. Using defaults.")
            return False
        try:
            with open(self.settings_file_path, 'r', encoding='utf-8') as f:
                settings_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log_warning(f"ERROR reading settings file '{self.settings_file_path}': {e}. Using defaults.")
            return False

        if not isinstance(settings_data, dict):
            log_warning(f"Settings file '{self.settings_file_path}' does not contain an object. Using defaults.")
            return False

        style_css = settings_data.get("style_css", {})
        if isinstance(style_css, dict):
            self.style_css = {str(k): str(v) for k, v in style_css.items()}
        else:
            log_warning("WARN: 'style_css' in settings is not a dictionary. Ignored.")

        associations = settings_data.get("file_associations", {})
        if isinstance(associations, dict):
            self.file_associations = {str(k): str(v) for k, v in associations.items()}
        else:
            log_warning("WARN: 'file_associations' in settings is not a dictionary. Ignored.")

        font_size = settings_data.get("font_size", DEFAULT_FONT_SIZE)
        if isinstance(font_size, int) and not isinstance(font_size, bool) and font_size > 0:
            self.font_size = font_size
        else:
            log_warning(f"WARN: Invalid 'font_size' {font_size!r} in settings. Using {DEFAULT_FONT_SIZE}.")

        log_debug(f"<-- SettingsManager: Loaded {len(self.style_css)} style overrides, "
                  f"{len(self.file_associations)} file associations, font size {self.font_size}.")
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "style_css": dict(self.style_css),
            "file_associations": dict(self.file_associations),
            "font_size": self.font_size,
        }

    def save_settings(self) -> None:
        log_debug(f"--> SettingsManager: save_settings to {self.settings_file_path}")
        with open(self.settings_file_path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=4, ensure_ascii=False)
