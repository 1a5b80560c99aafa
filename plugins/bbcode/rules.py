# --- START OF FILE plugins/bbcode/rules.py ---
"""
BBCode mode.

- Highlights [tag]...[/tag] and [tag="value"]...[/tag] regions, including ones spanning lines
- Tag insertion shortcuts grouped by prefix (common, font, list, table, special)
- Shift on the last key of a chord inserts the tag in attribute mode: [tag=]
"""

from typing import List, Tuple, Dict, Any, Optional
from PyQt5.QtGui import QTextCharFormat
from PyQt5.QtWidgets import QInputDialog

from plugins.base_mode_rules import BaseModeRules
from utils.logging_utils import log_debug

from .config import KEY_BINDINGS, FILE_PATTERNS, PREFIX_COMMON, CUSTOM_TAG_KEY
from .tag_manager import TagManager
from .tag_inserter import insert_tag_in_editor


class ModeRules(BaseModeRules):
    def __init__(self, main_window_ref=None):
        super().__init__(main_window_ref)
        self.tag_manager = TagManager(main_window_ref)

    def get_display_name(self) -> str:
        return "BBCode"

    def get_file_patterns(self) -> Tuple[str, ...]:
        return FILE_PATTERNS

    def get_syntax_highlighting_rules(self) -> List[Tuple[str, QTextCharFormat]]:
        return self.tag_manager.get_syntax_highlighting_rules()

    def reconfigure_styles(self, style_overrides: Optional[Dict[str, str]] = None):
        self.tag_manager.reconfigure_styles(style_overrides)

    def make_insert_handler(self, editor_widget, tag: str, attribute_mode: bool):
        def handler(checked=False):
            insert_tag_in_editor(editor_widget, tag, attribute_mode)
        return handler

    def prompt_and_insert_tag(self, editor_widget, attribute_mode: bool = False) -> Optional[str]:
        tag, ok = QInputDialog.getText(editor_widget, "Insert BBCode Tag", "Tag name:")
        tag = tag.strip()
        if not ok or not tag:
            log_debug("BBCode: Custom tag insertion cancelled.")
            return None
        insert_tag_in_editor(editor_widget, tag, attribute_mode)
        return tag

    def get_plugin_actions(self, editor_widget=None) -> List[Dict[str, Any]]:
        actions = []
        for binding in KEY_BINDINGS:
            for attribute_mode in (False, True):
                key = binding.attribute_chord_key() if attribute_mode else binding.key
                actions.append({
                    'name': f"insert_{binding.tag}{'_attr' if attribute_mode else ''}",
                    'text': f"{binding.text} [{binding.tag}{'=' if attribute_mode else ''}]",
                    'shortcut': f"{binding.prefix}, {key}",
                    'handler': self.make_insert_handler(editor_widget, binding.tag, attribute_mode),
                    'menu': 'BBCode',
                })

        for attribute_mode in (False, True):
            key = f"Shift+{CUSTOM_TAG_KEY}" if attribute_mode else CUSTOM_TAG_KEY
            actions.append({
                'name': f"insert_custom{'_attr' if attribute_mode else ''}",
                'text': f"Other Tag{' (attribute)' if attribute_mode else ''}...",
                'shortcut': f"{PREFIX_COMMON}, {key}",
                'handler': (lambda checked=False, am=attribute_mode:
                            self.prompt_and_insert_tag(editor_widget, am)),
                'menu': 'BBCode',
            })
        return actions
