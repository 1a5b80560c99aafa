#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for wrapping the selection or cursor position in a tag pair.
"""

import pytest
from PyQt5.QtGui import QTextDocument, QTextCursor

from plugins.bbcode.tag_inserter import insert_tag, insert_tag_in_editor, opening_tag, closing_tag


def make_cursor(text, anchor, position=None):
    doc = QTextDocument()
    doc.setPlainText(text)
    cursor = QTextCursor(doc)
    cursor.setPosition(anchor)
    if position is not None:
        cursor.setPosition(position, QTextCursor.KeepAnchor)
    return doc, cursor


def test_opening_and_closing_tags():
    assert opening_tag("b") == "[b]"
    assert opening_tag("color", True) == "[color=]"
    assert closing_tag("url") == "[/url]"


def test_wraps_selection_and_selects_wrapped_text(qapp):
    doc, cursor = make_cursor("hello world", 6, 11)

    cursor = insert_tag(cursor, "b", False)

    assert doc.toPlainText() == "hello [b]world[/b]"
    assert cursor.anchor() == 9
    assert cursor.position() == 14
    assert cursor.selectedText() == "world"


def test_empty_selection_leaves_cursor_after_opening_tag(qapp):
    doc, cursor = make_cursor("hello", 5)

    cursor = insert_tag(cursor, "i", False)

    assert doc.toPlainText() == "hello[i][/i]"
    assert cursor.anchor() == 8
    assert cursor.position() == 8
    assert not cursor.hasSelection()


def test_attribute_mode_places_cursor_before_bracket(qapp):
    doc, cursor = make_cursor("hello", 5)

    cursor = insert_tag(cursor, "color", True)

    text = doc.toPlainText()
    assert text == "hello[color=][/color]"
    assert cursor.position() == 12
    assert cursor.anchor() == 12
    assert text[cursor.position()] == "]"


def test_attribute_mode_with_selection(qapp):
    doc, cursor = make_cursor("say hi now", 4, 6)

    cursor = insert_tag(cursor, "size", True)

    assert doc.toPlainText() == "say [size=]hi[/size] now"
    assert cursor.position() == 4 + len("[size=]") - 1
    assert not cursor.hasSelection()


def test_backwards_selection_is_wrapped(qapp):
    doc, cursor = make_cursor("hello world", 11, 6)

    insert_tag(cursor, "u", False)

    assert doc.toPlainText() == "hello [u]world[/u]"


def test_multiline_selection_keeps_line_breaks(qapp):
    doc, cursor = make_cursor("a\nb\nc", 0, 3)

    cursor = insert_tag(cursor, "quote", False)

    assert doc.toPlainText() == "[quote]a\nb[/quote]\nc"
    assert cursor.selectionStart() == len("[quote]")
    assert cursor.selectionEnd() == len("[quote]a\nb")


@pytest.mark.parametrize("text,anchor,position,tag,attribute_mode", [
    ("hello world", 6, 11, "b", False),
    ("hello", 5, None, "i", False),
    ("hello", 0, None, "color", True),
    ("first\nsecond\nthird", 2, 15, "code", False),
    ("", 0, None, "*", False),
])
def test_document_length_invariant(qapp, text, anchor, position, tag, attribute_mode):
    doc, cursor = make_cursor(text, anchor, position)
    deleted = abs((position if position is not None else anchor) - anchor)
    between = deleted

    insert_tag(cursor, tag, attribute_mode)

    expected = (len(text) - deleted + len(opening_tag(tag, attribute_mode))
                + between + len(closing_tag(tag)))
    assert len(doc.toPlainText()) == expected


def test_insertion_is_a_single_undo_step(qapp):
    doc, cursor = make_cursor("hello world", 6, 11)

    insert_tag(cursor, "b", False)
    doc.undo()

    assert doc.toPlainText() == "hello world"


def test_insert_in_editor_reads_and_updates_editor_cursor(qapp):
    from PyQt5.QtWidgets import QPlainTextEdit

    editor = QPlainTextEdit()
    editor.setPlainText("hello world")
    cursor = editor.textCursor()
    cursor.setPosition(0)
    cursor.setPosition(5, QTextCursor.KeepAnchor)
    editor.setTextCursor(cursor)

    insert_tag_in_editor(editor, "b")
    insert_tag_in_editor(editor, "i")

    assert editor.toPlainText() == "[b][i]hello[/i][/b] world"
    assert editor.textCursor().selectedText() == "hello"
