"""Property-based tests for version validation and rendering."""

import ast
from pathlib import Path

import pytest
from hypothesis import given, settings, strategies as st

from projdata.exceptions import ValidationError
from projdata.metadata import (
    Language,
    ProjectMetadata,
    RenderOptions,
    is_valid_version,
    validate_metadata,
    validate_version,
)
from projdata.metadata._task import GenerateProjectDataTask
from projdata.templating import render_metadata, string_literal

# =============================================================================
# Strategies
# =============================================================================

numeric_identifier = st.integers(min_value=0, max_value=10**9).map(str)

alphanumeric_identifier = st.from_regex(r"[0-9]*[A-Za-z-][0-9A-Za-z-]*", fullmatch=True)

prerelease_identifier = st.one_of(numeric_identifier, alphanumeric_identifier)

build_identifier = st.from_regex(r"[0-9A-Za-z-]+", fullmatch=True)


@st.composite
def semantic_versions(draw: st.DrawFn) -> str:
    core = ".".join(draw(numeric_identifier) for _ in range(3))
    prerelease = draw(st.lists(prerelease_identifier, max_size=3))
    build = draw(st.lists(build_identifier, max_size=3))

    version = core
    if prerelease:
        version += "-" + ".".join(prerelease)
    if build:
        version += "+" + ".".join(build)
    return version


# Lone surrogates are rejected by validation before anything is rendered.
metadata_text = st.text(alphabet=st.characters(codec="utf-8"), max_size=40)


@st.composite
def texts_with_surrogate(draw: st.DrawFn) -> str:
    text = draw(st.text(alphabet=st.characters(codec="utf-8"), max_size=10))
    surrogate = chr(draw(st.integers(min_value=0xD800, max_value=0xDFFF)))
    position = draw(st.integers(min_value=0, max_value=len(text)))
    return text[:position] + surrogate + text[position:]


# =============================================================================
# Version Properties
# =============================================================================


@given(version=semantic_versions())
@settings(max_examples=200, deadline=None)
def test_semantic_versions_are_valid(version: str) -> None:
    """Property: every version built from the grammar is accepted."""
    assert is_valid_version(version)
    validate_version(version)


@given(
    major=st.integers(min_value=0, max_value=999),
    minor=st.integers(min_value=0, max_value=999),
)
def test_two_part_versions_are_invalid(major: int, minor: int) -> None:
    """Property: MAJOR.MINOR without a patch number is rejected."""
    assert not is_valid_version(f"{major}.{minor}")


@given(version=semantic_versions())
def test_leading_zero_in_major_is_invalid(version: str) -> None:
    """Property: prefixing the major number with a zero is rejected."""
    assert not is_valid_version(f"0{version}")


@given(version=semantic_versions(), whitespace=st.sampled_from([" ", "\t", "\n"]))
def test_surrounding_whitespace_is_invalid(version: str, whitespace: str) -> None:
    """Property: versions are matched in full, not searched."""
    assert not is_valid_version(version + whitespace)
    assert not is_valid_version(whitespace + version)


@given(version=st.text(max_size=20))
def test_validate_agrees_with_is_valid(version: str) -> None:
    """Property: validate_version raises exactly when is_valid_version is False."""
    if is_valid_version(version):
        validate_version(version)
    else:
        with pytest.raises(ValidationError) as exc_info:
            validate_version(version)
        assert exc_info.value.value == version


# =============================================================================
# Rendering Properties
# =============================================================================


@given(value=metadata_text, language=st.sampled_from(list(Language)))
def test_string_literal_is_quoted_single_line(value: str, language: Language) -> None:
    """Property: literals never contain raw newlines or unescaped quotes."""
    literal = string_literal(value, language.value)

    assert literal.startswith('"')
    assert literal.endswith('"')
    assert "\n" not in literal
    assert "\r" not in literal
    assert '"' not in literal[1:-1].replace('\\"', "")


@given(value=metadata_text)
def test_python_literal_evaluates_to_value(value: str) -> None:
    """Property: the Python literal evaluates back to the original string."""
    assert ast.literal_eval(string_literal(value, "python")) == value


@given(
    group=st.from_regex(r"[a-z]+(\.[a-z]+)*", fullmatch=True),
    description=metadata_text,
    version=semantic_versions(),
)
@settings(max_examples=50, deadline=None)
def test_rendering_is_deterministic(
    group: str, description: str, version: str
) -> None:
    """Property: identical inputs always render identical output and hash."""
    metadata = ProjectMetadata(
        group=group, name="demo", version=version, description=description
    )
    options = RenderOptions()

    assert render_metadata(metadata, options) == render_metadata(metadata, options)

    first = GenerateProjectDataTask(metadata, Path("out"), state_file=Path("s.json"))
    second = GenerateProjectDataTask(metadata, Path("out"), state_file=Path("s.json"))
    assert first.inputs_hash() == second.inputs_hash()


@given(value=metadata_text, language=st.sampled_from(list(Language)))
def test_string_literal_has_no_raw_control_characters(
    value: str, language: Language
) -> None:
    """Property: every C0 control character and DEL is escaped."""
    literal = string_literal(value, language.value)

    assert not any(char < " " or char == "\x7f" for char in literal)


@given(description=texts_with_surrogate())
def test_unencodable_description_is_rejected(description: str) -> None:
    """Property: text that cannot be written as UTF-8 never reaches the writer."""
    metadata = ProjectMetadata(
        group="com.example", name="demo", version="1.0.0", description=description
    )

    with pytest.raises(ValidationError) as exc_info:
        validate_metadata(metadata)

    assert exc_info.value.problem_id == "unencodable-text"
