import pytest


@pytest.fixture
def martini():
    return {
        "name": "Martini",
        "iba": True,
        "glass": "martini",
        "ingredients": [
            {"ingredient": "Gin", "unit": "cl", "amount": 6},
            {"ingredient": "Dry Vermouth", "unit": "cl", "amount": 1},
        ],
    }


@pytest.fixture
def screwdriver():
    return {
        "name": "Screwdriver",
        "iba": True,
        "glass": "highball",
        "ingredients": [
            {"ingredient": "Vodka", "unit": "cl", "amount": 5},
            {"ingredient": "Orange juice", "unit": "cl", "amount": 10},
        ],
    }


@pytest.fixture
def cocktails(martini, screwdriver):
    return [martini, screwdriver]


@pytest.fixture
def mixed_cocktails():
    """A collection covering labels, string amounts, special entries and a malformed record."""
    return [
        {
            "name": "Negroni",
            "ingredients": [
                {"ingredient": "Gin", "unit": "cl", "amount": 3},
                {"ingredient": "Campari", "unit": "cl", "amount": 3},
                {
                    "ingredient": "Vermouth",
                    "unit": "cl",
                    "amount": 3,
                    "label": "Sweet red vermouth",
                },
            ],
        },
        {
            "name": "Mojito",
            "ingredients": [
                {"ingredient": "White rum", "unit": "cl", "amount": 4},
                {"ingredient": "Lime juice", "unit": "cl", "amount": 3},
                {"ingredient": "Mint", "amount": "6", "label": "Mint sprigs"},
                {"ingredient": "Sugar", "amount": "2 teaspoons"},
                {"ingredient": "Soda water"},
            ],
        },
        {"name": "Broken", "ingredients": "Gin, tonic"},
        {
            "name": "Old Fashioned",
            "ingredients": [
                {"ingredient": "Bourbon whiskey", "unit": "cl", "amount": 4.5},
                {"amount": "2 dashes", "ingredient": "Angostura bitters"},
                {"special": "Few dashes plain water"},
            ],
        },
    ]
