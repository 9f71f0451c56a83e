"""
Tests for color/logic/ (classification.py, formatting.py, aggregate.py)

Couvre:
- is_monochrome() / is_grey() on every syntax of the same color
- keyword_round_trips()
- serialize(): passthrough, canonical names, aliases, idempotence, invariant violation
- aggregate_colors(): dedup (post-format), hue sort, frequency sort, all_colors
"""

import importlib

import pytest

classification = importlib.import_module(
    "css_color_extractor.extraction.color.logic.classification"
)
formatting = importlib.import_module("css_color_extractor.extraction.color.logic.formatting")
aggregate = importlib.import_module("css_color_extractor.extraction.color.logic.aggregate")
model = importlib.import_module("css_color_extractor.extraction.color.model")
types = importlib.import_module("css_color_extractor.extraction.types")

Options = types.Options
parse = model.parse_color


# ── Classification ───────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "literal,mono,grey",
    [
        ("black", True, False),
        ("white", True, False),
        ("#000", True, False),
        ("hsl(0, 0%, 100%)", True, False),
        ("gray", True, True),
        ("grey", True, True),
        ("#808080", True, True),
        ("rgb(128,128,128)", True, True),
        ("rgba(1, 1, 1, 0.5)", True, True),
        ("hsl(0, 0, 1%)", True, True),
        ("lightgrey", True, True),
        ("red", False, False),
        ("#123123", False, False),
        # faint tints stay chromatic even though their rounded HSL is (0, 0%, 50%)
        ("rgb(128,127,127)", False, False),
        ("rgb(129,128,128)", False, False),
        ("rgb(127,128,127)", False, False),
    ],
)
def test_monochrome_and_grey(literal, mono, grey):
    color = parse(literal)
    assert classification.is_monochrome(color) is mono
    assert classification.is_grey(color) is grey


def test_keyword_round_trips():
    assert classification.keyword_round_trips(parse("rgb(255, 255, 255)")) is True
    assert classification.keyword_round_trips(parse("rgba(255, 0, 0, 0.3)")) is True
    assert classification.keyword_round_trips(parse("rgb(1, 2, 3)")) is False


# ── Formatting ───────────────────────────────────────────────────────────────
def test_serialize_passthrough_without_format():
    assert formatting.serialize("#fFf", Options()) == "#fFf"
    assert formatting.serialize("#fFf", Options(color_format="cmyk")) == "#fFf"


@pytest.mark.parametrize(
    "color_format,expected",
    [
        ("hexString", "#123123"),
        ("hex", "#123123"),
        ("hexaString", "#123123FF"),
        ("hexWithAlpha", "#123123FF"),
        ("rgbString", "rgb(18, 49, 35)"),
        ("rgb", "rgb(18, 49, 35)"),
        ("percentString", "rgb(7%, 19%, 14%)"),
        ("hslString", "hsl(153, 46%, 13%)"),
        ("hwbString", "hwb(153, 7%, 81%)"),
    ],
)
def test_serialize_formats(color_format, expected):
    assert formatting.serialize("#123123", Options(color_format=color_format)) == expected


@pytest.mark.parametrize(
    "literal,color_format",
    [
        ("#FFFFFF", "hexString"),
        ("rgb(18, 49, 35)", "rgbString"),
        ("hsl(153, 46%, 13%)", "hslString"),
        ("rgb(7%, 19%, 14%)", "percentString"),
        ("white", "keyword"),
    ],
)
def test_serialize_is_idempotent(literal, color_format):
    assert formatting.serialize(literal, Options(color_format=color_format)) == literal


def test_normalize_color_format():
    assert formatting.normalize_color_format("hex") == "hexString"
    assert formatting.normalize_color_format("keyword") == "keyword"
    assert formatting.normalize_color_format(None) is None
    assert formatting.normalize_color_format("nope") is None


def test_serialize_invalid_literal_raises():
    with pytest.raises(formatting.InvalidColorLiteral):
        formatting.serialize("solid", Options(color_format="hexString"))


# ── Aggregation ──────────────────────────────────────────────────────────────
def test_aggregate_dedup_keeps_first_occurrence():
    assert aggregate.aggregate_colors(["red", "blue", "red"], Options()) == ["red", "blue"]


def test_aggregate_all_colors_keeps_duplicates():
    tokens = ["red", "blue", "red"]
    assert aggregate.aggregate_colors(tokens, Options(all_colors=True)) == tokens


def test_aggregate_dedup_compares_formatted_strings():
    tokens = ["red", "#FF0000", "#f00"]
    assert aggregate.aggregate_colors(tokens, Options()) == tokens
    assert aggregate.aggregate_colors(tokens, Options(color_format="hexString")) == ["#FF0000"]


def test_aggregate_sort_frequency():
    assert aggregate.aggregate_colors(["blue", "red", "blue"], Options(sort="frequency")) == [
        "blue",
        "red",
    ]
    assert aggregate.aggregate_colors(
        ["blue", "red", "blue"], Options(sort="frequency", all_colors=True)
    ) == ["blue", "blue", "red"]


def test_aggregate_sort_frequency_ties_keep_input_order():
    assert aggregate.aggregate_colors(["red", "lime", "blue"], Options(sort="frequency")) == [
        "red",
        "lime",
        "blue",
    ]


def test_aggregate_sort_hue_is_stable():
    tokens = ["blue", "gray", "lime", "red"]
    # gray and red both have hue 0 and keep their relative order
    assert aggregate.aggregate_colors(tokens, Options(sort="hue")) == ["gray", "red", "lime", "blue"]


def test_aggregate_sort_hue_uses_unrounded_hue():
    # both hues round to 10 degrees (10.1 vs 10.4)
    tokens = ["rgb(255,44,0)", "rgb(255,43,0)"]
    assert aggregate.aggregate_colors(tokens, Options(sort="hue")) == ["rgb(255,43,0)", "rgb(255,44,0)"]


def test_aggregate_unknown_sort_keeps_input_order():
    assert aggregate.aggregate_colors(["blue", "red"], Options(sort="alpha")) == ["blue", "red"]


def test_aggregate_invalid_token_fails_fast():
    with pytest.raises(formatting.InvalidColorLiteral):
        aggregate.aggregate_colors(["red", "solid"], Options(color_format="rgbString"))
    with pytest.raises(formatting.InvalidColorLiteral):
        aggregate.aggregate_colors(["red", "solid"], Options(sort="hue"))
