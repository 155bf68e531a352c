from pathlib import Path

import pytest

from simulator.model import Model

MODELS_DIR = Path(__file__).resolve().parent.parent / "models"

EXAMPLE_MODEL = {
    "states": [
        {
            "name": "A",
            "start": True,
            "transitions": [
                {"cons": "b", "prod": "_", "move": "L", "next": "B"},
                {"cons": "*", "prod": "*", "move": "S", "next": "C"},
            ],
        },
        {"name": "B"},
        {"name": "C", "final": True},
    ]
}


@pytest.fixture
def example_model():
    return Model.from_dict(EXAMPLE_MODEL, name="example")


@pytest.fixture
def models_dir():
    return MODELS_DIR


@pytest.fixture
def looping_model():
    """Never halts: keeps walking right over blanks."""
    return Model.from_dict({
        "states": [
            {"name": "walk", "start": True,
             "transitions": [{"cons": "*", "prod": "*", "move": "R", "next": "walk"}]},
        ]
    })
