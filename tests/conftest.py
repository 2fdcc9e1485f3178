"""Shared fixtures: a headless pygame and a document with one 500x500 field."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from roundsquare.field import Field
from roundsquare.randomizer import RandomGenerator
from roundsquare.surface import Node


@pytest.fixture
def document():
    root = Node(classes=["document"], style={"width": 960, "height": 640})
    root.append(Node(classes=["js-game-field"], style={
        "left": 10, "top": 10, "width": 500, "height": 500,
        "background_color": "#ffffff", "z_index": 3,
    }))
    return root


@pytest.fixture
def field(document):
    return Field(document.find("js-game-field"))


@pytest.fixture
def generator():
    return RandomGenerator(seed=1234)
