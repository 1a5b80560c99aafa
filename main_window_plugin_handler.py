# --- START OF FILE main_window_plugin_handler.py ---
import os
import fnmatch
import importlib
from typing import Dict, List, Optional
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QAction, QMenu
from PyQt5.QtGui import QKeySequence
from utils.logging_utils import log_debug, log_warning, log_error
from utils.syntax_highlighter import BBCodeHighlighter
from plugins.base_mode_rules import BaseModeRules

DEFAULT_FILE_ASSOCIATIONS = {
    "*.bbcode": "bbcode",
}


class ModeHandler:
    def __init__(self, main_window=None, file_associations: Optional[Dict[str, str]] = None):
        self.mw = main_window
        self.file_associations: Dict[str, str] = dict(DEFAULT_FILE_ASSOCIATIONS)
        if file_associations:
            self.file_associations.update(file_associations)
        self.current_rules: Optional[BaseModeRules] = None
        self.highlighter: Optional[BBCodeHighlighter] = None
        self.mode_actions: Dict[str, QAction] = {}
        self.editor_widget = None
        log_debug(f"ModeHandler '{self.__class__.__name__}' initialized with {len(self.file_associations)} file associations.")

    def register_mode(self, mode_name: str, patterns) -> None:
        for pattern in patterns:
            self.file_associations[pattern] = mode_name
            log_debug(f"    File association registered: '{pattern}' -> '{mode_name}'")

    def mode_for_filename(self, path: Optional[str]) -> Optional[str]:
        if not path:
            return None
        base_name = os.path.basename(path).lower()
        for pattern, mode_name in self.file_associations.items():
            if fnmatch.fnmatchcase(base_name, pattern.lower()):
                return mode_name
        return None

    def load_mode(self, mode_name: Optional[str]) -> BaseModeRules:
        log_debug(f"--> ModeHandler: load_mode called for '{mode_name}'.")
        if not mode_name:
            return self._load_fallback_rules()

        module_path = f"plugins.{mode_name}.rules"
        try:
            rules_module = importlib.import_module(module_path)
        except ImportError as e:
            log_error(f"    Could not import mode module {module_path}: {e}")
            return self._load_fallback_rules()

        rules_class = getattr(rules_module, 'ModeRules', None)
        if not (isinstance(rules_class, type) and issubclass(rules_class, BaseModeRules)):
            log_error(f"    Class 'ModeRules' not found or not a subclass of BaseModeRules in module {module_path}")
            return self._load_fallback_rules()

        rules = rules_class(main_window_ref=self.mw)
        self.register_mode(mode_name, rules.get_file_patterns())
        log_debug(f"<-- ModeHandler: Loaded {rules_class.__name__} ('{rules.get_display_name()}') from {module_path}")
        return rules

    def _load_fallback_rules(self) -> BaseModeRules:
        log_warning("    ModeHandler: Falling back to BaseModeRules.")
        return BaseModeRules(main_window_ref=self.mw)

    def deactivate(self) -> None:
        for action in self.mode_actions.values():
            self.editor_widget.removeAction(action)
            action.deleteLater()
        self.mode_actions = {}
        if self.highlighter is not None:
            self.highlighter.detach()
            self.highlighter = None
        self.current_rules = None
        self.editor_widget = None

    def activate(self, editor_widget, rules: BaseModeRules, menu_bar=None) -> List[QAction]:
        if self.current_rules is not None:
            self.deactivate()

        self.current_rules = rules
        self.editor_widget = editor_widget
        self.highlighter = BBCodeHighlighter(editor_widget.document(), rules.get_syntax_highlighting_rules())

        created = []
        for action_data in rules.get_plugin_actions(editor_widget):
            action_name = action_data.get('name')
            if not action_name: continue

            action = QAction(action_data.get('text', action_name), editor_widget)
            action.setObjectName(action_name)
            if 'shortcut' in action_data:
                action.setShortcut(QKeySequence(action_data['shortcut']))
                action.setShortcutContext(Qt.WidgetWithChildrenShortcut)
            if 'handler' in action_data: action.triggered.connect(action_data['handler'])
            editor_widget.addAction(action)
            self.mode_actions[action_name] = action
            created.append(action)

            if menu_bar is not None and action_data.get('menu'):
                menu_name = action_data['menu']
                target_menu = menu_bar.findChild(QMenu, f"&{menu_name}")
                if not target_menu:
                    target_menu = menu_bar.addMenu(f"&{menu_name}")
                    target_menu.setObjectName(f"&{menu_name}")
                target_menu.addAction(action)

        log_debug(f"ModeHandler: Activated '{rules.get_display_name()}' with "
                  f"{len(self.highlighter.rules)} highlighting rules and {len(created)} actions.")
        return created

    def reconfigure_styles(self, style_overrides: Optional[Dict[str, str]] = None) -> None:
        if self.current_rules is None or self.highlighter is None:
            return
        self.current_rules.reconfigure_styles(style_overrides)
        self.highlighter.set_rules(self.current_rules.get_syntax_highlighting_rules())
