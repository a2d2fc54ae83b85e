import ast

import pytest

from projdata.templating import string_literal


class TestStringLiteral:
    def test_wraps_plain_value_in_quotes(self) -> None:
        assert string_literal("demo", "kotlin") == '"demo"'

    def test_empty_value(self) -> None:
        assert string_literal("", "java") == '""'

    @pytest.mark.parametrize("language", ["kotlin", "java", "python"])
    def test_escapes_quotes_and_backslashes(self, language: str) -> None:
        assert string_literal('a"b\\c', language) == '"a\\"b\\\\c"'

    @pytest.mark.parametrize("language", ["kotlin", "java", "python"])
    def test_escapes_control_characters(self, language: str) -> None:
        assert string_literal("a\nb\tc\r", language) == '"a\\nb\\tc\\r"'

    @pytest.mark.parametrize(
        ("language", "expected"),
        [
            ("kotlin", '"a\\u0000b\\u001bc\\u007f"'),
            ("java", '"a\\000b\\033c\\177"'),
            ("python", '"a\\x00b\\x1bc\\x7f"'),
        ],
    )
    def test_escapes_other_control_characters(
        self, language: str, expected: str
    ) -> None:
        assert string_literal("a\x00b\x1bc\x7f", language) == expected

    @pytest.mark.parametrize("language", ["kotlin", "java", "python"])
    def test_leaves_no_raw_control_characters(self, language: str) -> None:
        value = "".join(chr(code) for code in [*range(0x20), 0x7F])

        literal = string_literal(value, language)

        assert not any(char < " " or char == "\x7f" for char in literal)

    def test_python_literal_with_controls_evaluates_back(self) -> None:
        value = "nul\x00 bell\x07 del\x7f"

        assert ast.literal_eval(string_literal(value, "python")) == value

    def test_escapes_dollar_for_kotlin(self) -> None:
        assert string_literal("${x}", "kotlin") == '"\\${x}"'

    @pytest.mark.parametrize("language", ["java", "python"])
    def test_keeps_dollar_for_other_languages(self, language: str) -> None:
        assert string_literal("${x}", language) == '"${x}"'

    def test_keeps_unicode(self) -> None:
        assert string_literal("café", "kotlin") == '"café"'

    def test_raises_for_unknown_language(self) -> None:
        with pytest.raises(ValueError, match="No string literal rules"):
            _ = string_literal("demo", "cobol")
