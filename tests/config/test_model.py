# topmark:header:start
#
#   project      : FormPrint
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `formprint.config.model.ResolvedOptions`."""

from __future__ import annotations

import pytest

from formprint.config.model import ResolvedOptions
from formprint.finish.colors import DisplayColor
from formprint.render.navigation import (
    DocumentNavigator,
    Representation,
    ValueNavigator,
)


def test_from_options_fills_in_defaults() -> None:
    """A partial map is completed from the built-in defaults."""
    options = ResolvedOptions.from_options({"width": 30, "map": {"justify": True}})

    assert options.width == 30
    assert options.map_justify is True
    assert options.map_comma is True
    assert options.tab_size == 8
    assert options.get("list.indent") == 2
    assert options.representation is None
    assert options.navigator is None


def test_color_map_resolves_to_display_colors() -> None:
    """Color names become `DisplayColor` members."""
    options = ResolvedOptions.from_options({"color_map": {"paren": "blue"}})

    assert options.color_map["paren"] is DisplayColor.BLUE
    assert options.color_map["none"] is DisplayColor.NONE


def test_values_are_read_only() -> None:
    """The merged map cannot be mutated through the resolved options."""
    options = ResolvedOptions.from_options({})

    with pytest.raises(TypeError):
        options.values["width"] = 10  # type: ignore[index]


@pytest.mark.parametrize(
    "representation, navigator_type",
    [
        (Representation.DOCUMENT, DocumentNavigator),
        (Representation.VALUE, ValueNavigator),
    ],
)
def test_bind_pairs_representation_and_navigator(
    representation: Representation, navigator_type: type
) -> None:
    """Binding always installs the navigator matching the representation."""
    base = ResolvedOptions.from_options({})

    bound = base.bind(representation)

    assert bound.representation is representation
    assert isinstance(bound.navigator, navigator_type)
    assert bound.navigator.representation is representation
    assert base.navigator is None
