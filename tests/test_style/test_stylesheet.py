"""Tests for the string front end: comments, rule splitting, at-rules."""

import pytest

from stylers.class_name import Class
from stylers.errors import UnbalancedBraceError, UnterminatedCommentError
from stylers.style import (
    AtRule,
    StyleDeclaration,
    StyleRule,
    Stylesheet,
    from_str,
    split_rules,
    strip_comments,
    validate_braces,
)

CLS = Class("test")


# ---------------------------------------------------------------------------
# Comment stripping
# ---------------------------------------------------------------------------


class TestStripComments:
    def test_removes_comment(self):
        assert strip_comments("a/* x */b") == "ab"

    def test_removes_every_comment(self):
        assert strip_comments("/* 1 */a{}/* 2 */b{}") == "a{}b{}"

    def test_multiline_comment(self):
        assert strip_comments("a{\n/* one\ntwo */\n}") == "a{\n\n}"

    def test_comment_reassembled_by_excision(self):
        assert strip_comments("//**/* x */") == ""

    def test_idempotent(self):
        text = "div{color:red;/* note */}/* trailing */"
        once = strip_comments(text)
        assert strip_comments(once) == once

    def test_no_comment_unchanged(self):
        assert strip_comments("div{color:red;}") == "div{color:red;}"

    def test_unterminated_comment(self):
        with pytest.raises(UnterminatedCommentError) as excinfo:
            strip_comments("a /* b")
        assert excinfo.value.offset == 2

    def test_markers_inside_strings_are_not_special(self):
        # Known limitation: quoted comment markers still start a comment.
        assert strip_comments('div{content:"/* x */";}') == 'div{content:"";}'


# ---------------------------------------------------------------------------
# Brace validation
# ---------------------------------------------------------------------------


class TestValidateBraces:
    def test_balanced(self):
        validate_braces("a{b{}}c{}")

    def test_unclosed(self):
        with pytest.raises(UnbalancedBraceError) as excinfo:
            validate_braces("div{")
        assert excinfo.value.offset == 3

    def test_unexpected_close(self):
        with pytest.raises(UnbalancedBraceError) as excinfo:
            validate_braces("div}")
        assert excinfo.value.offset == 3

    def test_braces_in_strings_ignored(self):
        validate_braces("div{content:'}';}")
        validate_braces('a{content:"{"}')

    def test_escaped_quote_inside_string(self):
        validate_braces(r'a{content:"\"}";}')

    def test_from_str_rejects_unbalanced(self):
        with pytest.raises(UnbalancedBraceError):
            from_str("div{color:red;", CLS)


# ---------------------------------------------------------------------------
# Rule splitting
# ---------------------------------------------------------------------------


class TestSplitRules:
    def test_two_rules(self):
        assert split_rules("a{x:1;} b{y:2;}") == ["a{x:1;}", "b{y:2;}"]

    def test_statement_at_rule(self):
        assert split_rules("@import url(a.css); a{x:1;}") == [
            "@import url(a.css);",
            "a{x:1;}",
        ]

    def test_nested_braces_do_not_end_rule(self):
        assert split_rules("@media x{a{b:1;}} c{d:2;}") == [
            "@media x{a{b:1;}}",
            "c{d:2;}",
        ]

    def test_semicolon_in_style_rule_is_not_a_boundary(self):
        assert split_rules("a{x:1;y:2;}") == ["a{x:1;y:2;}"]

    def test_trailing_text_dropped(self):
        assert split_rules("a{x:1;} stray") == ["a{x:1;}"]

    def test_stray_semicolon_skipped(self):
        assert split_rules("a{x:1;}; b{y:2;}") == ["a{x:1;}", "b{y:2;}"]

    def test_brace_in_string_does_not_end_rule(self):
        assert split_rules("a{content:'}';} b{x:1;}") == ["a{content:'}';}", "b{x:1;}"]

    def test_empty(self):
        assert split_rules("  \n ") == []


# ---------------------------------------------------------------------------
# Scoping whole stylesheets
# ---------------------------------------------------------------------------


class TestFromStr:
    def test_tag_rule(self):
        source = "div{border:1px solid black;margin:25px 50px 75px 100px;background-color:lightblue;}"
        assert from_str(source, CLS) == (
            "div.test{border:1px solid black;margin:25px 50px 75px 100px;"
            "background-color:lightblue;}"
        )

    def test_selector_list(self):
        assert from_str("h1, h2{color:red;}", CLS) == "h1.test, h2.test{color:red;}"

    def test_descendant(self):
        assert from_str("div p{color:red;}", CLS) == "div.test p.test{color:red;}"

    def test_pseudo_class(self):
        assert from_str("a:hover{color:red;}", CLS) == "a.test:hover{color:red;}"

    def test_root_unchanged(self):
        assert from_str(":root{--x:1;}", CLS) == ":root{--x:1;}"
        assert from_str(":root{--x:1;}", Class("l-zzzzzz")) == ":root{--x:1;}"

    def test_attribute(self):
        assert (
            from_str('input[type="text"]{color:red;}', CLS)
            == 'input[type="text"].test{color:red;}'
        )

    def test_media_block(self):
        source = "@media (min-width: 100px){ div{color:red;} }"
        assert from_str(source, CLS) == "@media (min-width: 100px){div.test{color:red;}}"

    def test_nested_rule_scoped_like_top_level(self):
        top = from_str("div{color:red;}", CLS)
        nested = from_str("@media print{div{color:red;}}", CLS)
        assert nested == "@media print{" + top + "}"

    def test_statement_at_rule_verbatim(self):
        assert (
            from_str("@import url(a.css);div{x:1;}", CLS)
            == "@import url(a.css);div.test{x:1;}"
        )

    def test_order_preserved_across_nesting(self):
        source = "b{x:1;}a{x:2;}@media print{c{x:3;}d{x:4;}}e{x:5;}"
        assert from_str(source, CLS) == (
            "b.test{x:1;}a.test{x:2;}@media print{c.test{x:3;}d.test{x:4;}}e.test{x:5;}"
        )

    def test_doubly_nested_at_rules(self):
        source = "@supports (display:grid){@media print{a{x:1;}}}"
        assert from_str(source, CLS) == "@supports (display:grid){@media print{a.test{x:1;}}}"

    def test_font_face_kept_verbatim(self):
        source = "@font-face{font-family:Foo;src:url(f.woff);}"
        assert from_str(source, CLS) == source

    def test_keyframes_kept_verbatim(self):
        source = "@keyframes fade{from{opacity:0;}to{opacity:1;}}"
        assert from_str(source, CLS) == source

    def test_formatted_file(self):
        source = "/* card */\nh1,\nh2 {\n  color: red;\n}\n\n.card p {\n  margin: 0;\n}\n"
        assert from_str(source, CLS) == (
            "h1.test,h2.test{\n  color: red;\n}.card.test p.test{\n  margin: 0;\n}"
        )

    def test_declarations_not_validated(self):
        source = "div{future-prop: who(knows) !important; not even css}"
        assert from_str(source, CLS) == "div.test{future-prop: who(knows) !important; not even css}"

    def test_brace_in_string_value(self):
        assert from_str("div{content:'}'}", CLS) == "div.test{content:'}'}"

    def test_empty(self):
        assert from_str("", CLS) == ""


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


class TestStylesheetModel:
    def test_rule_kinds(self):
        sheet, _ = Stylesheet.from_str("@import 'a.css';@media print{a{x:1;}}b{y:2;}", CLS)
        assert [type(rule) for rule in sheet.rules] == [AtRule, AtRule, StyleRule]

    def test_statement_at_rule_has_no_block(self):
        sheet, _ = Stylesheet.from_str("@charset 'utf-8';", CLS)
        assert sheet.rules[0] == AtRule(prelude="@charset 'utf-8';")

    def test_style_rule_parts(self):
        sheet, _ = Stylesheet.from_str("div p { color: red; }", CLS)
        rule = sheet.rules[0]
        assert rule == StyleRule(
            selector_text="div.test p.test", style=StyleDeclaration(" color: red; ")
        )

    def test_nested_stylesheet(self):
        sheet, _ = Stylesheet.from_str("@media print{a{x:1;}}", CLS)
        block = sheet.rules[0].block
        assert isinstance(block, Stylesheet)
        assert block.css_text() == "a.test{x:1;}"

    def test_selectors_collected_from_all_rules(self):
        _, selectors = Stylesheet.from_str(
            "div p{x:1;} a:hover{} @media print{*{y:2;}}", CLS
        )
        assert selectors == {"div", "p", "a:hover", "*"}

    def test_declaration_serialization(self):
        assert StyleDeclaration("color:red;").css_text() == "{color:red;}"

    def test_rules_are_frozen(self):
        rule, _ = StyleRule.from_str("a{x:1;}", CLS)
        with pytest.raises(AttributeError):
            rule.selector_text = "b"  # type: ignore[misc]
