"""Tests for SKILL.md parsing."""

import pytest

from local_skills_mcp.errors import (
    InvalidHeaderError,
    MissingClosingDelimiterError,
    MissingDescriptionError,
    MissingNameError,
    MissingOpeningDelimiterError,
    SkillFormatError,
)
from local_skills_mcp.parser import parse_skill_file, split_frontmatter


VALID = """---
name: code-reviewer
description: Reviews code
version: 2
---

# Reviewer

Check everything.
"""


def test_parse_valid_skill():
    """Test header fields and body extraction."""
    parsed = parse_skill_file(VALID)
    
    assert parsed.name == "code-reviewer"
    assert parsed.description == "Reviews code"
    assert parsed.body == "# Reviewer\n\nCheck everything."
    assert parsed.header["version"] == 2


def test_body_is_trimmed_exactly():
    """Test body is the trailing text with surrounding whitespace removed."""
    body = "Line one\n\n  indented line\nlast"
    text = f"---\nname: a\ndescription: b\n---\n\n\n{body}\n\n   \n"
    
    assert parse_skill_file(text).body == body


def test_windows_line_endings():
    """Test CRLF documents parse like LF documents."""
    text = "---\r\nname: a\r\ndescription: b\r\n---\r\nBody\r\n"
    parsed = parse_skill_file(text)
    
    assert parsed.name == "a"
    assert parsed.body == "Body"


def test_closing_delimiter_at_end_of_file():
    """Test a document with no body."""
    parsed = parse_skill_file("---\nname: a\ndescription: b\n---")
    assert parsed.body == ""


def test_missing_opening_delimiter():
    """Test text without leading frontmatter."""
    with pytest.raises(MissingOpeningDelimiterError, match="missing opening delimiter"):
        parse_skill_file("name: a\ndescription: b\n---\nBody")


def test_missing_closing_delimiter():
    """Test frontmatter that never ends."""
    with pytest.raises(MissingClosingDelimiterError, match="missing closing delimiter"):
        parse_skill_file("---\nname: a\ndescription: b\nBody")


def test_missing_name():
    """Test header without name."""
    with pytest.raises(MissingNameError, match='"name"'):
        parse_skill_file("---\ndescription: b\n---\nBody")


def test_missing_description():
    """Test header without description."""
    with pytest.raises(MissingDescriptionError, match='"description"'):
        parse_skill_file("---\nname: a\n---\nBody")


def test_format_violations_are_distinct():
    """Test each violated rule produces a different error type and message."""
    documents = [
        "no frontmatter",
        "---\nname: a\n",
        "---\ndescription: b\n---\n",
        "---\nname: a\n---\n",
    ]
    errors = []
    for text in documents:
        with pytest.raises(SkillFormatError) as exc_info:
            parse_skill_file(text)
        errors.append(exc_info.value)
    
    assert len({type(e) for e in errors}) == 4
    assert len({str(e) for e in errors}) == 4


def test_empty_name_counts_as_missing():
    with pytest.raises(MissingNameError):
        parse_skill_file("---\nname: ''\ndescription: b\n---\n")


def test_non_string_name_counts_as_missing():
    with pytest.raises(MissingNameError):
        parse_skill_file("---\nname: [a, b]\ndescription: b\n---\n")


def test_invalid_yaml_header():
    """Test malformed YAML between the delimiters."""
    with pytest.raises(InvalidHeaderError):
        parse_skill_file("---\nname: [unclosed\ndescription: b\n---\n")


def test_non_mapping_header():
    with pytest.raises(InvalidHeaderError):
        parse_skill_file("---\n- a\n- b\n---\n")


def test_empty_header_reports_missing_name():
    with pytest.raises(MissingNameError):
        parse_skill_file("---\n---\nBody")


def test_split_frontmatter_uses_first_closing_line():
    """Test later --- lines stay in the body."""
    header, body = split_frontmatter("---\nname: a\n---\nintro\n---\nmore")
    
    assert header == "name: a"
    assert body == "intro\n---\nmore"
