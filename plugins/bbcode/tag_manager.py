import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from PyQt5.QtGui import QTextCharFormat, QColor, QFont
from utils.logging_utils import log_debug, log_warning

from .config import TAG_TABLE, DEFAULT_STYLE_CSS, TagSpec


# CSS weights 100..900 on the Qt5 0..99 scale
CSS_FONT_WEIGHTS = {
    100: QFont.Thin,
    200: QFont.ExtraLight,
    300: QFont.Light,
    400: QFont.Normal,
    500: QFont.Medium,
    600: QFont.DemiBold,
    700: QFont.Bold,
    800: QFont.ExtraBold,
    900: QFont.Black,
}


class InvalidTagNameError(ValueError):
    pass


def make_tag_pattern(tag) -> str:
    """
    Builds the pattern for one tag: [tag]...[/tag] or [tag="value"]...[/tag].

    The match is non-greedy and crosses newlines. The pattern has no capture
    groups, only the overall span is used for styling.
    """
    if not isinstance(tag, str) or not tag:
        raise InvalidTagNameError(f"Tag name must be a non-empty string, got {tag!r}")
    name = re.escape(tag)
    return r'(?s)\[' + name + r'(?:=".+?")?\].*?\[/' + name + r'\]'


def build_highlighting_rules(tag_table: Iterable[TagSpec] = TAG_TABLE) -> List[Tuple[str, str]]:
    return [(make_tag_pattern(spec.name), spec.style) for spec in tag_table]


def find_styled_ranges(text: str, rules: Sequence[Tuple[str, object]]) -> List[Tuple[int, int, object]]:
    """
    Runs every rule over the whole text and returns (start, end, style) in rule order.
    Later entries are applied over earlier ones by the highlighter.
    """
    ranges = []
    for pattern_str, style in rules:
        for match in re.finditer(pattern_str, text):
            if match.end() > match.start():
                ranges.append((match.start(), match.end(), style))
    return ranges


def apply_css_to_format(char_format: QTextCharFormat, css_str: str) -> QTextCharFormat:
    if not css_str:
        return char_format
    for prop in css_str.split(';'):
        prop = prop.strip()
        if not prop:
            continue
        parts = prop.split(':', 1)
        if len(parts) != 2:
            log_warning(f"TagManager: Ignoring malformed style property '{prop}'")
            continue
        key, value = parts[0].strip().lower(), parts[1].strip().lower()
        if key == 'color':
            char_format.setForeground(QColor(value))
        elif key == 'background-color':
            char_format.setBackground(QColor(value))
        elif key == 'font-weight':
            if value == 'bold':
                char_format.setFontWeight(QFont.Bold)
            elif value == 'normal':
                char_format.setFontWeight(QFont.Normal)
            elif value.isdigit() and 100 <= int(value) <= 900:
                char_format.setFontWeight(CSS_FONT_WEIGHTS[round(int(value), -2)])
            else:
                log_warning(f"TagManager: Unknown font-weight '{value}'")
        elif key == 'font-style':
            char_format.setFontItalic(value == 'italic')
        elif key == 'text-decoration':
            char_format.setFontUnderline('underline' in value)
            char_format.setFontStrikeOut('line-through' in value)
        else:
            log_warning(f"TagManager: Unsupported style property '{key}'")
    return char_format


class TagManager:
    def __init__(self, main_window_ref=None, tag_table: Sequence[TagSpec] = TAG_TABLE):
        self.mw = main_window_ref
        self.tag_table = tuple(tag_table)
        self.style_formats: Dict[str, QTextCharFormat] = {}
        self.reconfigure_styles()

    def reconfigure_styles(self, style_overrides: Optional[Dict[str, str]] = None):
        if style_overrides is None:
            style_overrides = getattr(self.mw, 'style_css', None) or {}
        style_css = dict(DEFAULT_STYLE_CSS)
        style_css.update(style_overrides)

        self.style_formats = {}
        for style, css_str in style_css.items():
            self.style_formats[style] = apply_css_to_format(QTextCharFormat(), css_str)
        log_debug(f"TagManager: Configured {len(self.style_formats)} styles.")

    def format_for_style(self, style: str) -> QTextCharFormat:
        char_format = self.style_formats.get(style)
        if char_format is None:
            log_warning(f"TagManager: No format for style '{style}', using plain text format.")
            char_format = QTextCharFormat()
        return char_format

    def get_syntax_highlighting_rules(self) -> List[Tuple[str, QTextCharFormat]]:
        return [(pattern, self.format_for_style(style))
                for pattern, style in build_highlighting_rules(self.tag_table)]
