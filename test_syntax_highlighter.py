#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for splitting document-wide matches into per-block highlight ranges.
"""

from PyQt5.QtGui import QTextDocument, QTextCharFormat, QFont, QTextCursor

from plugins.bbcode.tag_manager import TagManager, make_tag_pattern
from utils.syntax_highlighter import BBCodeHighlighter


def make_highlighter(text, rules=None):
    doc = QTextDocument()
    doc.setPlainText(text)
    if rules is None:
        rules = TagManager().get_syntax_highlighting_rules()
    return doc, BBCodeHighlighter(doc, rules)


def spans(highlighter, block_number):
    return [(start, length) for start, length, _ in highlighter.ranges_for_block(block_number)]


def test_single_line_match(qapp):
    doc, highlighter = make_highlighter("plain [b]bold[/b] plain")

    assert spans(highlighter, 0) == [(6, 11)]


def test_match_spanning_blocks_is_split(qapp):
    doc, highlighter = make_highlighter("[b]one\ntwo\nthree[/b] tail")

    assert spans(highlighter, 0) == [(0, 7)]
    assert spans(highlighter, 1) == [(0, 4)]
    assert spans(highlighter, 2) == [(0, 9)]


def test_unclosed_tag_is_not_highlighted(qapp):
    doc, highlighter = make_highlighter("[b]never closed\nstill open")

    assert spans(highlighter, 0) == []
    assert spans(highlighter, 1) == []


def test_cache_follows_document_edits(qapp):
    doc, highlighter = make_highlighter("[i]open\nline")
    assert spans(highlighter, 1) == []

    cursor = QTextCursor(doc)
    cursor.movePosition(QTextCursor.End)
    cursor.insertText("[/i]")

    assert spans(highlighter, 1) == [(0, 8)]


def test_formats_are_applied_to_layout(qapp):
    bold = QTextCharFormat()
    bold.setFontWeight(QFont.Bold)
    doc, highlighter = make_highlighter("x [b]y\nz[/b]", [(make_tag_pattern("b"), bold)])
    highlighter.rehighlight()

    second_block = doc.findBlockByNumber(1)
    applied = second_block.layout().formats()

    assert any(r.start == 0 and r.length == 5 and r.format.fontWeight() == QFont.Bold for r in applied)


def test_set_rules_replaces_rules(qapp):
    doc, highlighter = make_highlighter("[u]x[/u]", [])
    assert spans(highlighter, 0) == []

    highlighter.set_rules([(make_tag_pattern("u"), QTextCharFormat())])

    assert spans(highlighter, 0) == [(0, 8)]


def test_positions_account_for_astral_characters(qapp):
    doc, highlighter = make_highlighter("\U0001F600 [b]x[/b]")

    # the emoji takes two positions in the document
    assert spans(highlighter, 0) == [(3, 8)]
