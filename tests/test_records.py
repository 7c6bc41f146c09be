import json

import pytest

from cocktail_analysis.records import (
    AmountShape,
    Cocktail,
    IngredientEntry,
    MeasuredIngredient,
    NumericAmount,
    SpecialIngredient,
    TextAmount,
    ensure_record_collection,
    load_cocktails,
    parse_amount,
    parse_cocktails_json,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (4.5, NumericAmount(4.5)),
        (2, NumericAmount(2)),
        ("2 dashes", TextAmount("2 dashes")),
        (None, None),
        (True, None),
        ([1, 2], None),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize(
    "value, expected_shape",
    [
        (6, AmountShape.NUMBER),
        (0.5, AmountShape.NUMBER),
        (0, None),
        (0.0, None),
        (float("nan"), None),
        ("6", AmountShape.STRING),
        ("0", AmountShape.STRING),
        ("", None),
    ],
)
def test_amount_shape(value, expected_shape):
    assert parse_amount(value).shape == expected_shape


def test_from_dict_measured_ingredient():
    data = {"unit": "cl", "amount": 2, "ingredient": "Vermouth", "label": "Sweet red vermouth"}
    entry = IngredientEntry.from_dict(data)

    assert isinstance(entry, MeasuredIngredient)
    assert entry.name == "Vermouth"
    assert entry.unit == "cl"
    assert entry.amount == NumericAmount(2)
    assert entry.label == "Sweet red vermouth"
    assert entry.fields == ["amount", "ingredient", "label", "unit"]
    assert entry.raw is data


def test_from_dict_special_ingredient():
    entry = IngredientEntry.from_dict({"special": "Few dashes plain water"})

    assert isinstance(entry, SpecialIngredient)
    assert entry.name is None
    assert entry.amount_shapes() == [AmountShape.SPECIAL]
    assert entry.display_text() == "Few dashes plain water"


def test_special_takes_display_precedence():
    entry = IngredientEntry.from_dict(
        {"ingredient": "Water", "amount": 1, "unit": "cl", "special": "Top up with water"}
    )

    assert entry.display_text() == "Top up with water"
    assert entry.amount_shapes() == [AmountShape.NUMBER, AmountShape.SPECIAL]


@pytest.mark.parametrize(
    "data, expected_text",
    [
        ({"unit": "cl", "amount": 4.5, "ingredient": "Gin"}, "4.5 cl Gin"),
        ({"amount": "2 dashes", "ingredient": "Angostura bitters"}, "2 dashes Angostura bitters"),
        ({"ingredient": "Mint", "amount": "6", "label": "Mint sprigs"}, "6 Mint sprigs"),
        ({"ingredient": "Soda water"}, "Soda water"),
        ({"ingredient": "Gin", "unit": "cl", "amount": 0}, "cl Gin"),
        ({"ingredient": "Sugar", "amount": ""}, "Sugar"),
        ({"ingredient": "Water", "unit": "ml", "amount": 1234567.0}, "1234567 ml Water"),
        ({"ingredient": "Water", "unit": "ml", "amount": 1234567.25}, "1234567.25 ml Water"),
        ({"ingredient": "Gin", "unit": "cl", "amount": 6.0}, "6 cl Gin"),
    ],
)
def test_display_text(data, expected_text):
    assert IngredientEntry.from_dict(data).display_text() == expected_text


@pytest.mark.parametrize("name", ["", "   ", None, 42])
def test_from_dict_missing_name(name):
    assert IngredientEntry.from_dict({"ingredient": name}).name is None


def test_from_dict_trims_name():
    assert IngredientEntry.from_dict({"ingredient": "  Gin "}).name == "Gin"


def test_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        IngredientEntry.from_dict(["Gin"])


def test_cocktail_from_dict():
    cocktail = Cocktail.from_dict(
        {
            "name": "Martini",
            "iba": True,
            "colors": ["clear"],
            "glass": "martini",
            "category": "All Day Cocktail",
            "ingredients": [
                {"ingredient": "Gin", "unit": "cl", "amount": 6},
                "not an entry",
                {"special": "Stir with ice"},
            ],
            "garnish": "Olive",
            "preparation": "Stir and strain.",
        }
    )

    assert cocktail.name == "Martini"
    assert cocktail.iba is True
    assert cocktail.glass == "martini"
    assert len(cocktail.ingredients) == 2
    assert cocktail.ingredient_names() == ["Gin"]


def test_cocktail_from_dict_without_ingredients():
    cocktail = Cocktail.from_dict({"name": "Empty"})
    assert cocktail.ingredients == ()


@pytest.mark.parametrize("value", [[], (), [{"name": "Martini"}]])
def test_ensure_record_collection_accepts_sequences(value):
    assert ensure_record_collection(value) is value


@pytest.mark.parametrize("value", [None, "cocktails", {"name": "Martini"}, 3, b"[]"])
def test_ensure_record_collection_rejects(value):
    with pytest.raises(TypeError, match="must be a list of cocktails"):
        ensure_record_collection(value)


def test_parse_cocktails_json():
    cocktails = parse_cocktails_json('[{"name": "Martini", "ingredients": []}]')
    assert cocktails == [{"name": "Martini", "ingredients": []}]


def test_parse_cocktails_json_invalid():
    with pytest.raises(ValueError, match="Failed to parse cocktails JSON") as excinfo:
        parse_cocktails_json("[{not json")
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_parse_cocktails_json_not_a_list():
    with pytest.raises(ValueError, match="must be a list of cocktails"):
        parse_cocktails_json('{"name": "Martini"}')


def test_load_cocktails(tmp_path):
    path = tmp_path / "cocktails.json"
    path.write_text('[{"name": "Caipirinha", "ingredients": [{"ingredient": "Cachaça"}]}]', encoding="utf-8")

    cocktails = load_cocktails(path)
    assert cocktails[0]["ingredients"][0]["ingredient"] == "Cachaça"
