"""End-to-end tests for the public entry points (stylesheet / declaration / value string)."""

from __future__ import annotations

import pytest

from css_color_extractor import (
    CssSyntaxError,
    Declaration,
    Options,
    extract_from_declaration,
    extract_from_stylesheet,
    extract_from_value_string,
)
from css_color_extractor.extraction.css import (
    build_selector_variables,
    does_property_allow_color,
    parse_declarations,
)

TAIL = " p { display: block; }"


# ---------- Single colors & properties ----------
@pytest.mark.parametrize(
    "css,expected",
    [
        ("a { color: red; }", ["red"]),
        ("a { color: #123; }", ["#123"]),
        ("a { color: #123123; }", ["#123123"]),
        ("a { color: rgb(1, 2, 3); }", ["rgb(1, 2, 3)"]),
        ("a { color: rgba(1, 2, 3, 0.5); }", ["rgba(1, 2, 3, 0.5)"]),
        ("a { color: hsl(1, 2%, 3%); }", ["hsl(1, 2%, 3%)"]),
        ("a { color: hsla(1, 2%, 3%, 0.5); }", ["hsla(1, 2%, 3%, 0.5)"]),
        ("a { background-color: red; }", ["red"]),
        ("a { border-color: red; }", ["red"]),
        ("a { border-top-color: red; }", ["red"]),
        ("a { border-right-color: red; }", ["red"]),
        ("a { border-bottom-color: red; }", ["red"]),
        ("a { border-left-color: red; }", ["red"]),
        ("a { outline-color: red; }", ["red"]),
        ("a { text-decoration: underline wavy red; }", ["red"]),
        ("a { text-decoration-color: red; }", ["red"]),
        ("a { fill: red; stroke: blue; }", ["red", "blue"]),
        ("a { stop-color: red; flood-color: blue; lighting-color: lime; }", ["red", "blue", "lime"]),
        ("a { background-image: linear-gradient(to bottom, red, blue); }", ["red", "blue"]),
        ("a { text-shadow: 1px 1px 2px black; }", ["black"]),
        ("a { box-shadow: 10px 5px 5px black; }", ["black"]),
        ("a { background: red url(../foo.jpg) no-repeat center center; }", ["red"]),
        ("a { background: red url(../foo.jpg), blue url(../bar.jpg); }", ["red", "blue"]),
        ("a { outline: 1px solid white; }", ["white"]),
        ("a { border: 1px solid white; }", ["white"]),
        ("a { border-top: 1px solid white; }", ["white"]),
        ("a { border-right: 1px solid white; }", ["white"]),
        ("a { border-bottom: 1px solid white; }", ["white"]),
        ("a { border-left: 1px solid white; }", ["white"]),
    ],
)
def test_extracts_from_color_properties(css, expected):
    assert extract_from_stylesheet(css + TAIL, {}) == expected


def test_other_properties_contribute_nothing():
    assert extract_from_stylesheet("a { display: red; content: blue; width: 1px }") == []


def test_nested_media_rules():
    css = "a { color: red; } @media (screen-only) { a { color: blue; } p { display: block; } }"
    assert extract_from_stylesheet(css) == ["red", "blue"]


# ---------- Grey / monochrome filters ----------
@pytest.mark.parametrize(
    "grey",
    [
        "grey", "gray", "lightgrey", "lightgray", "dimgrey", "dimgray", "darkgrey", "darkgray",
        "#111", "#121212", "rgb(1, 1, 1)", "rgba(1, 1, 1, 0.5)", "hsl(0, 0, 1%)",
        "hsla(0, 0, 1%, 0.5)",
    ],
)
def test_without_grey_omits_greys(grey):
    css = f"a {{ color: red; }} p {{ color: {grey}; }}"
    assert extract_from_stylesheet(css, {"withoutGrey": True}) == ["red"]


def test_without_grey_keeps_black_and_white():
    css = "a { color: red; } p { color: grey; } h1 { color: black; } h2 { color: white; }"
    assert extract_from_stylesheet(css, Options(without_grey=True)) == ["red", "black", "white"]


@pytest.mark.parametrize(
    "mono",
    [
        "grey", "white", "#fFf", "#fFfFfF", "rgba(255, 255, 255)", "rgba(255, 255, 255, 0.5)",
        "hsl(0, 0, 100%)", "hsla(0, 0, 100%, 0.5)", "black", "#000", "#000000",
        "rgba(0, 0, 0)", "rgba(0, 0, 0, 0.5)", "hsl(0, 0, 0%)", "hsla(0, 0, 0%, 0.5)",
    ],
)
def test_without_monochrome_omits_achromatic(mono):
    css = f"a {{ color: red; }} p {{ color: {mono}; }}"
    assert extract_from_stylesheet(css, {"withoutMonochrome": True}) == ["red"]


def test_near_greys_survive_grey_and_monochrome_filters():
    tints = "rgb(128,127,127) rgb(127,128,127)"
    assert extract_from_value_string(tints, {"withoutGrey": True}) == [
        "rgb(128,127,127)",
        "rgb(127,128,127)",
    ]
    css = "a{color:rgb(129,128,128)}"
    assert extract_from_stylesheet(css, {"withoutMonochrome": True}) == ["rgb(129,128,128)"]


# ---------- Output formats ----------
@pytest.mark.parametrize(
    "css,color_format,expected",
    [
        ("a { color: #123123; }", "rgbString", ["rgb(18, 49, 35)"]),
        ("a { color: #123123; }", "hslString", ["hsl(153, 46%, 13%)"]),
        ("a { color: #123123; }", "percentString", ["rgb(7%, 19%, 14%)"]),
        ("a { color: #123123; }", "hwbString", ["hwb(153, 7%, 81%)"]),
        ("a { color: rgba(18, 49, 35, 0.5); }", "hexaString", ["#12312380"]),
        ("a { color: rgb(255, 255, 255); }", "hexString", ["#FFFFFF"]),
        ("a { color: rgb(255, 255, 255); }", "keyword", ["white"]),
        ("a { color: rgb(1, 2, 3); }", "keyword", []),
    ],
)
def test_output_formats(css, color_format, expected):
    assert extract_from_stylesheet(css, {"colorFormat": color_format}) == expected


def test_unknown_format_is_passthrough():
    assert extract_from_stylesheet("a { color: #fFf }", {"colorFormat": "cmyk"}) == ["#fFf"]


# ---------- Ordering & dedup ----------
def test_dedup_and_all_colors():
    css = "a{color:red}b{color:blue}c{color:red}"
    assert extract_from_stylesheet(css) == ["red", "blue"]
    assert extract_from_stylesheet(css, {"allColors": True}) == ["red", "blue", "red"]


def test_sort_frequency():
    css = "a{color:blue}b{color:red}c{color:blue}"
    assert extract_from_stylesheet(css, {"sort": "frequency"}) == ["blue", "red"]


def test_sort_hue():
    css = "a{color:blue}b{color:lime}c{color:red}"
    assert extract_from_stylesheet(css, {"sort": "hue"}) == ["red", "lime", "blue"]


def test_dedup_after_format():
    css = "a{color:red}b{color:#FF0000}"
    assert extract_from_stylesheet(css) == ["red", "#FF0000"]
    assert extract_from_stylesheet(css, {"colorFormat": "hexString"}) == ["#FF0000"]


# ---------- Variables ----------
def test_root_variable_resolution():
    assert extract_from_stylesheet(":root{--c:red} a{color:var(--c)}") == ["red"]


def test_unresolved_variable_yields_nothing():
    assert extract_from_stylesheet("a{color:var(--missing)}") == []


def test_selector_variable_overrides_root():
    css = ":root{--c:red} a{--c:blue; color:var(--c)} b{color:var(--c)}"
    assert extract_from_stylesheet(css, {"allColors": True}) == ["blue", "red"]


def test_custom_property_values_are_not_colors_by_themselves():
    assert extract_from_stylesheet(":root{--c:red}") == []


# ---------- Entry points agree ----------
@pytest.mark.parametrize(
    "css",
    [
        "a{color:red}b{color:blue}c{color:red; display: block}",
        ":root{--c:#123} a{border:1px solid var(--c)} @media print { b { color: var(--c) } }",
        "a { background: linear-gradient(red, blue), url(x.png) lime; outline: 0 }",
    ],
)
def test_stylesheet_equals_concatenated_declarations(css):
    opts = Options(all_colors=True)
    decls = parse_declarations(css)
    sv = build_selector_variables(decls)
    walked = [
        color
        for d in decls
        if does_property_allow_color(d.property)
        for color in extract_from_declaration(d, opts, sv)
    ]
    assert extract_from_stylesheet(css, opts) == walked


def test_extract_from_declaration():
    assert extract_from_declaration(Declaration("border", "1px solid red")) == ["red"]
    assert extract_from_declaration(Declaration("display", "red")) == []
    decl = Declaration("color", "var(--c)", "a")
    assert extract_from_declaration(decl, None, {":root": {"--c": "lime"}}) == ["lime"]


def test_extract_from_value_string_has_no_allow_list():
    assert extract_from_value_string("red, blue red", {"colorFormat": "hex"}) == ["#FF0000", "#0000FF"]
    assert extract_from_value_string("var(--c) var(--d)", None, {"--c": "red"}) == ["red"]


def test_options_type_is_checked():
    with pytest.raises(TypeError):
        extract_from_value_string("red", 42)  # type: ignore[arg-type]


def test_syntax_errors_propagate():
    with pytest.raises(CssSyntaxError):
        extract_from_stylesheet("a { color: red } b")
