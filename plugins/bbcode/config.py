from typing import NamedTuple, Optional

STYLE_BOLD = "bold"
STYLE_ITALIC = "italic"
STYLE_UNDERLINE = "underline"
STYLE_STRIKE = "strike"
STYLE_LINK = "link"
STYLE_CODE = "code"
STYLE_KEYWORD = "keyword"
STYLE_VARIABLE = "variable"
STYLE_TYPE = "type"
STYLE_CONSTANT = "constant"
STYLE_FUNCTION = "function"

DEFAULT_STYLE_CSS = {
    STYLE_BOLD: "font-weight: bold;",
    STYLE_ITALIC: "font-style: italic;",
    STYLE_UNDERLINE: "text-decoration: underline;",
    STYLE_STRIKE: "text-decoration: line-through;",
    STYLE_LINK: "color: #1A5FB4; text-decoration: underline;",
    STYLE_CODE: "color: #8B4513; background-color: #F4F0E8;",
    STYLE_KEYWORD: "color: #A020F0; font-weight: bold;",
    STYLE_VARIABLE: "color: #A0522D;",
    STYLE_TYPE: "color: #228B22;",
    STYLE_CONSTANT: "color: #008B8B;",
    STYLE_FUNCTION: "color: #0000FF;",
}


class TagSpec(NamedTuple):
    name: str
    style: str


TAG_TABLE = (
    TagSpec("attachment", STYLE_VARIABLE),
    TagSpec("b", STYLE_BOLD),
    TagSpec("center", STYLE_KEYWORD),
    TagSpec("code", STYLE_CODE),
    TagSpec("color", STYLE_VARIABLE),
    TagSpec("del", STYLE_STRIKE),
    TagSpec("email", STYLE_LINK),
    TagSpec("font", STYLE_VARIABLE),
    TagSpec("gvideo", STYLE_LINK),
    TagSpec("i", STYLE_ITALIC),
    TagSpec("img", STYLE_LINK),
    TagSpec("li", STYLE_TYPE),
    TagSpec("list", STYLE_TYPE),
    TagSpec("manual", STYLE_LINK),
    TagSpec("ol", STYLE_TYPE),
    TagSpec("quote", STYLE_CONSTANT),
    TagSpec("s", STYLE_STRIKE),
    TagSpec("size", STYLE_VARIABLE),
    TagSpec("table", STYLE_FUNCTION),
    TagSpec("td", STYLE_FUNCTION),
    TagSpec("th", STYLE_FUNCTION),
    TagSpec("tr", STYLE_FUNCTION),
    TagSpec("u", STYLE_UNDERLINE),
    TagSpec("ul", STYLE_TYPE),
    TagSpec("url", STYLE_LINK),
    TagSpec("wiki", STYLE_LINK),
    TagSpec("youtube", STYLE_LINK),
    TagSpec("*", STYLE_TYPE),
)


class KeyBinding(NamedTuple):
    prefix: str
    key: str
    tag: str
    text: str
    attribute_key: Optional[str] = None

    def attribute_chord_key(self) -> str:
        return self.attribute_key or f"Shift+{self.key}"


# Mnemonic prefixes; the attribute-mode gesture is the same chord with Shift on the last key,
# except where a binding names its own attribute_key.
PREFIX_COMMON = "Ctrl+T"
PREFIX_FONT = "Ctrl+Shift+F"
PREFIX_LIST = "Ctrl+L"
PREFIX_TABLE = "Ctrl+Shift+T"
PREFIX_SPECIAL = "Ctrl+Shift+S"

KEY_BINDINGS = (
    KeyBinding(PREFIX_COMMON, "B", "b", "Bold"),
    KeyBinding(PREFIX_COMMON, "C", "code", "Code"),
    KeyBinding(PREFIX_COMMON, "D", "del", "Deleted"),
    KeyBinding(PREFIX_COMMON, "E", "email", "Email"),
    KeyBinding(PREFIX_COMMON, "I", "i", "Italic"),
    KeyBinding(PREFIX_COMMON, "L", "url", "Link"),
    KeyBinding(PREFIX_COMMON, "M", "img", "Image"),
    KeyBinding(PREFIX_COMMON, "N", "center", "Center"),
    KeyBinding(PREFIX_COMMON, "Q", "quote", "Quote"),
    KeyBinding(PREFIX_COMMON, "S", "s", "Strikethrough"),
    KeyBinding(PREFIX_COMMON, "U", "u", "Underline"),

    KeyBinding(PREFIX_FONT, "C", "color", "Color"),
    KeyBinding(PREFIX_FONT, "F", "font", "Font"),
    KeyBinding(PREFIX_FONT, "S", "size", "Size"),

    KeyBinding(PREFIX_LIST, "I", "li", "List Item"),
    KeyBinding(PREFIX_LIST, "L", "list", "List"),
    KeyBinding(PREFIX_LIST, "O", "ol", "Ordered List"),
    KeyBinding(PREFIX_LIST, "U", "ul", "Unordered List"),
    # "*" matches the key that types it on any layout; Shift is usually part of typing it,
    # so attribute mode uses Ctrl instead
    KeyBinding(PREFIX_LIST, "*", "*", "List Bullet", "Ctrl+*"),

    KeyBinding(PREFIX_TABLE, "D", "td", "Table Cell"),
    KeyBinding(PREFIX_TABLE, "H", "th", "Table Header"),
    KeyBinding(PREFIX_TABLE, "R", "tr", "Table Row"),
    KeyBinding(PREFIX_TABLE, "T", "table", "Table"),

    KeyBinding(PREFIX_SPECIAL, "A", "attachment", "Attachment"),
    KeyBinding(PREFIX_SPECIAL, "G", "gvideo", "Google Video"),
    KeyBinding(PREFIX_SPECIAL, "M", "manual", "Manual Reference"),
    KeyBinding(PREFIX_SPECIAL, "W", "wiki", "Wiki Reference"),
    KeyBinding(PREFIX_SPECIAL, "Y", "youtube", "YouTube Video"),
)

CUSTOM_TAG_KEY = "T"

FILE_PATTERNS = ("*.bbcode",)
