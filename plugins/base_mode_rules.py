# --- START OF FILE plugins/base_mode_rules.py ---
from typing import List, Tuple, Dict, Any
from PyQt5.QtGui import QTextCharFormat


class BaseModeRules:
    def __init__(self, main_window_ref=None):
        self.mw = main_window_ref

    def get_display_name(self) -> str:
        return "Plain Text"

    def get_file_patterns(self) -> Tuple[str, ...]:
        return ()

    def get_syntax_highlighting_rules(self) -> List[Tuple[str, QTextCharFormat]]:
        return []

    def get_plugin_actions(self, editor_widget=None) -> List[Dict[str, Any]]:
        return []

    def reconfigure_styles(self, style_overrides: Dict[str, str] = None):
        pass
