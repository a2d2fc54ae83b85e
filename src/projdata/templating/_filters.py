"""Jinja2 filters for rendering source code."""

from typing import Final

_NAMED_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Per language: named escapes, then the format of every other C0 control
# character and DEL. Kotlin treats "$" as the start of a string template.
# Java decodes \u escapes before lexing, so a \u000a would end the literal.
_LITERAL_RULES: Final[dict[str, tuple[dict[str, str], str]]] = {
    "kotlin": ({**_NAMED_ESCAPES, "$": "\\$"}, "\\u{:04x}"),
    "java": (_NAMED_ESCAPES, "\\{:03o}"),
    "python": (_NAMED_ESCAPES, "\\x{:02x}"),
}


def _is_control(char: str) -> bool:
    return char < " " or char == "\x7f"


def string_literal(value: str, language: str) -> str:
    """Quote a value as a double-quoted string literal.

    Backslashes and quotes are escaped, and no control character is left
    raw, so the literal always stays on one line and compiles.

    Args:
        value: The raw string.
        language: Target language name (kotlin, java, python).

    Returns:
        The escaped value wrapped in double quotes.

    Raises:
        ValueError: If the language is unknown.
    """
    try:
        escapes, control = _LITERAL_RULES[language]
    except KeyError:
        msg = f"No string literal rules for language: {language}"
        raise ValueError(msg) from None

    parts: list[str] = []
    for char in value:
        if char in escapes:
            parts.append(escapes[char])
        elif _is_control(char):
            parts.append(control.format(ord(char)))
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'
