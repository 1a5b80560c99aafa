# --- START OF FILE utils/syntax_highlighter.py ---

from typing import Dict, List, Optional, Sequence, Tuple
from PyQt5.QtGui import QSyntaxHighlighter, QTextCharFormat, QTextDocument

from .logging_utils import log_debug
from plugins.bbcode.tag_manager import find_styled_ranges


def _utf16_offsets(text: str) -> Optional[List[int]]:
    """Maps str indices to QTextDocument positions, or None when they already agree."""
    if all(ord(ch) <= 0xFFFF for ch in text):
        return None
    offsets = [0]
    for ch in text:
        offsets.append(offsets[-1] + (2 if ord(ch) > 0xFFFF else 1))
    return offsets


class BBCodeHighlighter(QSyntaxHighlighter):
    """
    Applies (pattern, format) rules to the whole document so a match can span
    several blocks. Matches are computed once per document revision and split
    into per-block slices; highlightBlock only replays the slices.
    """

    def __init__(self, parent: QTextDocument, rules: Optional[Sequence[Tuple[str, QTextCharFormat]]] = None):
        super().__init__(parent)
        self.rules: List[Tuple[str, QTextCharFormat]] = list(rules or [])
        self._block_ranges_cache: Dict[int, List[Tuple[int, int, QTextCharFormat]]] = {}
        self._cache_revision: Optional[int] = None

        parent.contentsChange.connect(self.on_contents_change)
        log_debug(f"BBCodeHighlighter initialized with {len(self.rules)} rules.")

    def on_contents_change(self, position, chars_removed, chars_added):
        # A single edit can open or close a region that ends in another block
        self._invalidate_cache()
        self.rehighlight()

    def detach(self) -> None:
        doc = self.document()
        if doc is not None:
            doc.contentsChange.disconnect(self.on_contents_change)
            self.setDocument(None)
        self._invalidate_cache()

    def set_rules(self, rules: Sequence[Tuple[str, QTextCharFormat]]) -> None:
        self.rules = list(rules)
        self._invalidate_cache()
        log_debug(f"BBCodeHighlighter: Rules replaced, {len(self.rules)} active.")
        if self.document():
            self.rehighlight()

    def _invalidate_cache(self) -> None:
        self._block_ranges_cache.clear()
        self._cache_revision = None

    def _rebuild_cache(self) -> None:
        doc = self.document()
        if not doc:
            self._invalidate_cache()
            return
        revision = doc.revision()
        if self._cache_revision == revision:
            return

        self._cache_revision = revision
        self._block_ranges_cache.clear()
        if not self.rules:
            return

        full_text = doc.toPlainText()
        offsets = _utf16_offsets(full_text)
        for start, end, fmt in find_styled_ranges(full_text, self.rules):
            if offsets is not None:
                start, end = offsets[start], offsets[end]
            block = doc.findBlock(start)
            while block.isValid() and start < end:
                block_start = block.position()
                block_end = block_start + block.length()
                overlap_start = max(start, block_start)
                overlap_end = min(end, block_end)
                if overlap_end > overlap_start:
                    self._block_ranges_cache.setdefault(block.blockNumber(), []).append(
                        (overlap_start - block_start, overlap_end - overlap_start, fmt)
                    )
                if block_end >= end:
                    break
                block = block.next()

    def ranges_for_block(self, block_number: int) -> List[Tuple[int, int, QTextCharFormat]]:
        self._rebuild_cache()
        return self._block_ranges_cache.get(block_number, [])

    def highlightBlock(self, text):
        block_number = self.currentBlock().blockNumber()
        for start, length, fmt in self.ranges_for_block(block_number):
            self.setFormat(start, length, fmt)
