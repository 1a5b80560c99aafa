import sys
import os
from typing import Optional

from PyQt5.QtWidgets import QApplication, QMainWindow, QMessageBox, QPlainTextEdit, QAction
from PyQt5.QtGui import QFont, QKeySequence

from settings_manager import SettingsManager
from main_window_plugin_handler import ModeHandler
from utils.logging_utils import log_debug, log_info, log_error


class MainWindow(QMainWindow):
    def __init__(self, file_path: Optional[str] = None, settings_manager: Optional[SettingsManager] = None):
        super().__init__()
        log_debug("++++++++++++++++++++ MainWindow: Initializing ++++++++++++++++++++")
        self.settings_manager = settings_manager or SettingsManager(self)
        self.settings_manager.load_settings()
        self.style_css = dict(self.settings_manager.style_css)

        self.file_path: Optional[str] = None
        self.editor = QPlainTextEdit(self)
        self.editor.setObjectName("bbcode_text_edit")
        font = QFont("Monospace")
        font.setStyleHint(QFont.TypeWriter)
        font.setPointSize(self.settings_manager.font_size)
        self.editor.setFont(font)
        self.setCentralWidget(self.editor)

        self.mode_handler = ModeHandler(self, self.settings_manager.file_associations)

        file_menu = self.menuBar().addMenu("&File")
        save_action = QAction("&Save", self)
        save_action.setShortcut(QKeySequence.Save)
        save_action.triggered.connect(self.save_file)
        file_menu.addAction(save_action)

        self.editor.document().modificationChanged.connect(lambda _: self.update_title())

        if file_path:
            self.open_file(file_path)
        else:
            self.activate_mode(None)

    def activate_mode(self, mode_name: Optional[str]):
        rules = self.mode_handler.load_mode(mode_name)
        self.mode_handler.activate(self.editor, rules, self.menuBar())
        self.statusBar().showMessage(f"Mode: {rules.get_display_name()}", 3000)

    def open_file(self, file_path: str):
        log_info(f"Opening '{file_path}'")
        text = ""
        if os.path.exists(file_path):
            try:
                with open(file_path, 'r', encoding='utf-8') as f:
                    text = f.read()
            except (OSError, UnicodeDecodeError) as e:
                log_error(f"Could not read '{file_path}': {e}", exc_info=True)
                QMessageBox.critical(self, "Open Error", f"Could not read '{file_path}':\n{e}")
                return
        self.file_path = file_path
        self.editor.setPlainText(text)
        self.editor.document().setModified(False)
        self.activate_mode(self.mode_handler.mode_for_filename(file_path))
        self.update_title()

    def save_file(self) -> bool:
        if not self.file_path:
            self.statusBar().showMessage("No file to save.", 2000)
            return False
        try:
            with open(self.file_path, 'w', encoding='utf-8') as f:
                f.write(self.editor.toPlainText())
        except OSError as e:
            log_error(f"Could not save '{self.file_path}': {e}", exc_info=True)
            QMessageBox.critical(self, "Save Error", f"Could not save '{self.file_path}':\n{e}")
            return False
        self.editor.document().setModified(False)
        self.statusBar().showMessage(f"Saved {self.file_path}", 2000)
        log_debug(f"Saved '{self.file_path}'")
        return True

    def update_title(self):
        name = os.path.basename(self.file_path) if self.file_path else "Untitled"
        modified = "*" if self.editor.document().isModified() else ""
        self.setWindowTitle(f"{modified}{name} - BBCode Editor")

    def closeEvent(self, event):
        if self.editor.document().isModified():
            reply = QMessageBox.question(self, "Unsaved Changes",
                                         "Save changes before closing?",
                                         QMessageBox.Save | QMessageBox.Discard | QMessageBox.Cancel,
                                         QMessageBox.Save)
            if reply == QMessageBox.Cancel:
                event.ignore()
                return
            if reply == QMessageBox.Save and not self.save_file():
                event.ignore()
                return
        event.accept()


def main(argv=None):
    argv = list(sys.argv if argv is None else argv)
    log_debug("================= Application Start =================")
    app = QApplication(argv)

    window = MainWindow(argv[1] if len(argv) > 1 else None)
    window.resize(900, 650)
    window.show()
    log_debug("Starting Qt event loop...")
    exit_code = app.exec_()
    log_debug(f"Qt event loop finished with exit code: {exit_code}")
    log_debug("================= Application End =================")
    return exit_code


if __name__ == '__main__':
    sys.exit(main())
