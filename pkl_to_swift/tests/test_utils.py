#!/usr/bin/env python3

import re

import pytest

from pkl_to_swift.keywords import SWIFT_RESERVED_KEYWORDS, is_reserved_word
from pkl_to_swift.utils import normalize_enum_name, normalize_module_name, normalize_name


class TestNormalizeName:
    """Test cases for Swift identifier normalization"""

    def test_reserved_word_is_escaped(self):
        assert normalize_name("fileprivate") == "`fileprivate`"
        assert normalize_name("class") == "`class`"
        assert normalize_name("Self") == "`Self`"

    def test_reserved_word_match_is_case_sensitive(self):
        assert normalize_name("Class") == "Class"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("my-cool-name", "myCoolName"),
            ("foo bar", "fooBar"),
            ("foo--bar", "fooBar"),
            ("foo.bar", "fooBar"),
            ("-foo", "Foo"),
            ("foo-", "foo"),
            ("snake_case", "snake_case"),
            ("alreadyCamel", "alreadyCamel"),
            ("héllo wörld", "hélloWörld"),
            ("", ""),
        ],
    )
    def test_split_and_join(self, raw, expected):
        assert normalize_name(raw) == expected

    def test_leading_digit_kept_by_default(self):
        assert normalize_name("2fast") == "2fast"

    def test_leading_digit_prefix(self):
        assert normalize_name("2fast", leading_digit_prefix="N") == "N2fast"
        assert normalize_name("fast2", leading_digit_prefix="N") == "fast2"

    def test_idempotent_on_identifier_characters(self):
        for raw in ["myCoolName", "snake_case", "x2", "Ünïcode"]:
            once = normalize_name(raw)
            assert normalize_name(once) == once

    def test_output_has_no_delimiters(self):
        for raw in ["a b", "a.b.c", "x--y!!z", "-lead", "trail?", "mixed-Case name"]:
            assert not re.search(r"\W", normalize_name(raw))


class TestNormalizeModuleName:
    """Test cases for module name normalization"""

    def test_dotted_module_name(self):
        assert normalize_module_name("com.example.Foo") == "comexamplefoo"

    def test_simple_module_name(self):
        assert normalize_module_name("MyModule") == "mymodule"

    def test_separators_are_joined(self):
        assert normalize_module_name("my-lib.Core") == "mylibcore"
        assert normalize_module_name("my_lib") == "mylib"

    def test_reserved_module_name(self):
        assert normalize_module_name("import") == "`import`"


class TestNormalizeEnumName:
    """Test cases for enum case name normalization"""

    def test_empty_label(self):
        assert normalize_enum_name("") == "empty"

    def test_custom_empty_name(self):
        assert normalize_enum_name("", empty_name="none_") == "none_"

    def test_label_without_identifier_characters(self):
        assert normalize_enum_name("---") == "empty"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("RED", "red"),
            ("dark-red", "darkRed"),
            ("DARK-RED", "darkRed"),
            ("Foo Bar", "fooBar"),
            ("camelCase", "camelCase"),
            ("2x", "2x"),
        ],
    )
    def test_lower_camel_case(self, raw, expected):
        assert normalize_enum_name(raw) == expected

    def test_wildcard_label(self):
        assert normalize_enum_name("_") == "empty"

    def test_leading_digit_prefix_keeps_its_case(self):
        assert normalize_enum_name("2x", leading_digit_prefix="N") == "N2x"
        assert normalize_enum_name("2-fast", leading_digit_prefix="N") == "N2Fast"

    def test_reserved_word_is_escaped(self):
        assert normalize_enum_name("default") == "`default`"

    def test_reserved_word_after_lowering_is_escaped(self):
        assert normalize_enum_name("Default") == "`default`"
        assert normalize_enum_name("CASE") == "`case`"


class TestReservedWords:
    """Test cases for the reserved word table"""

    def test_membership(self):
        assert is_reserved_word("fileprivate")
        assert is_reserved_word("willSet")
        assert is_reserved_word("package")
        assert is_reserved_word("actor")
        assert is_reserved_word("async")
        assert not is_reserved_word("myProperty")

    def test_table_is_immutable(self):
        assert isinstance(SWIFT_RESERVED_KEYWORDS, frozenset)


if __name__ == "__main__":
    pytest.main([__file__])
