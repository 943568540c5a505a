"""
Tests for hiccpy core primitives.
"""

from html import unescape

import pytest
from hiccpy import (
    SafeHTML,
    UNDEFINED,
    NullValueError,
    UndefinedValueError,
    attr,
    escape,
    raw,
)
from hiccpy.core import to_text


class TestSafeHTML:
    def test_content(self):
        s = SafeHTML("<p>hello</p>")
        assert s.content == "<p>hello</p>"
        assert s.__html__() == "<p>hello</p>"
        assert str(s) == "<p>hello</p>"

    def test_bool(self):
        assert bool(SafeHTML("content")) is True
        assert bool(SafeHTML("")) is False

    def test_add_safe(self):
        a = SafeHTML("<p>")
        b = SafeHTML("</p>")
        assert (a + b).content == "<p></p>"

    def test_add_unsafe_escapes(self):
        a = SafeHTML("<p>")
        result = a + "<script>"
        assert result.content == "<p>&lt;script&gt;"

    def test_radd(self):
        b = SafeHTML("</p>")
        result = "<p>" + b
        assert result.content == "&lt;p&gt;</p>"

    def test_hashable(self):
        s = SafeHTML("test")
        d = {s: "value"}
        assert d[SafeHTML("test")] == "value"


class TestRaw:
    def test_raw_passes_through(self):
        result = raw("<script>alert('hi')</script>")
        assert result.content == "<script>alert('hi')</script>"


class TestEscape:
    def test_all_special_characters(self):
        assert escape("& < > \" '") == "&amp; &lt; &gt; &quot; &#39;"

    def test_existing_entities_escaped_again(self):
        assert escape("&amp;") == "&amp;amp;"

    def test_unicode_untouched(self):
        assert escape("中文 日本語 🎉") == "中文 日本語 🎉"

    def test_numbers_and_booleans(self):
        assert escape(123) == "123"
        assert escape(True) == "true"
        assert escape(False) == "false"

    def test_custom_str_converted_then_escaped(self):
        class Money:
            def __str__(self):
                return "<$5>"

        assert escape(Money()) == "&lt;$5&gt;"

    @pytest.mark.parametrize(
        "text",
        ["plain", "<b>bold</b>", "Tom & Jerry's \"show\"", "&&<<>>''\"\"", ""],
    )
    def test_unescape_round_trip(self, text):
        assert unescape(escape(text)) == text


class TestToText:
    def test_booleans_lowercase(self):
        assert to_text(True) == "true"
        assert to_text(False) == "false"

    def test_none(self):
        assert to_text(None) == "null"

    def test_float(self):
        assert to_text(0.5) == "0.5"


class TestAttr:
    def test_attr_with_string(self):
        result = attr("class", "my-class")
        assert result.content == 'class="my-class"'

    def test_attr_escapes_value(self):
        result = attr("title", 'Say "hello"')
        assert result.content == 'title="Say &quot;hello&quot;"'

    def test_attr_with_false(self):
        result = attr("hidden", False)
        assert result.content == ""

    def test_attr_with_true(self):
        result = attr("disabled", True)
        assert result.content == "disabled"

    def test_attr_with_number(self):
        assert attr("tabindex", -1).content == 'tabindex="-1"'
        assert attr("data-index", 0).content == 'data-index="0"'

    def test_attr_with_empty_string(self):
        assert attr("alt", "").content == 'alt=""'

    def test_attr_with_none_raises(self):
        with pytest.raises(NullValueError, match='Attribute "disabled" has a None value'):
            attr("disabled", None)

    def test_attr_with_undefined_raises(self):
        with pytest.raises(UndefinedValueError, match='Attribute "href" has an undefined value'):
            attr("href", UNDEFINED)

    def test_attr_xss_prevention(self):
        result = attr("title", '"><script>alert(1)</script><a x="')
        assert "<script>" not in result.content
        assert "&quot;" in result.content


class TestUndefined:
    def test_singleton(self):
        assert type(UNDEFINED)() is UNDEFINED

    def test_falsy(self):
        assert not UNDEFINED

    def test_repr(self):
        assert repr(UNDEFINED) == "UNDEFINED"
