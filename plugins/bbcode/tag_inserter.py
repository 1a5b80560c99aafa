from PyQt5.QtGui import QTextCursor
from utils.logging_utils import log_debug


def _qt_length(text: str) -> int:
    # QTextDocument positions count UTF-16 code units
    return len(text.encode('utf-16-le')) // 2


def opening_tag(tag: str, attribute_mode: bool = False) -> str:
    return "[" + tag + ("=" if attribute_mode else "") + "]"


def closing_tag(tag: str) -> str:
    return "[/" + tag + "]"


def insert_tag(cursor: QTextCursor, tag: str, attribute_mode: bool = False) -> QTextCursor:
    """
    Wraps the selection of `cursor` (or its position) in an open/close tag pair.

    With attribute_mode the cursor ends up right before the ']' of the opening
    tag so a value can be typed. Otherwise the wrapped text is selected, which
    is an empty selection right after the opening tag when nothing was selected.
    The same cursor is returned; install it with editor.setTextCursor().
    """
    between_text = cursor.selectedText() if cursor.hasSelection() else ""
    # QTextCursor reports line breaks inside a selection as U+2029
    between_text = between_text.replace('\u2029', '\n')

    opening = opening_tag(tag, attribute_mode)
    closing = closing_tag(tag)

    cursor.beginEditBlock()
    try:
        if cursor.hasSelection():
            cursor.removeSelectedText()
        start = cursor.position()
        cursor.insertText(opening + between_text + closing)
        cursor.clearSelection()

        if attribute_mode:
            cursor.setPosition(start + _qt_length(opening) - 1)
        else:
            cursor.setPosition(start + _qt_length(opening))
            cursor.setPosition(start + _qt_length(opening) + _qt_length(between_text), QTextCursor.KeepAnchor)
    finally:
        cursor.endEditBlock()

    log_debug(f"TagInserter: Inserted '{opening}...{closing}' at {start} "
              f"(wrapped {len(between_text)} chars, attribute_mode={attribute_mode})")
    return cursor


def insert_tag_in_editor(editor, tag: str, attribute_mode: bool = False) -> QTextCursor:
    cursor = insert_tag(editor.textCursor(), tag, attribute_mode)
    editor.setTextCursor(cursor)
    return cursor
