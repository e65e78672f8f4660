import dataclasses

import pytest

from brandassets.config import BrandConfig, FaviconLayout, OgLayout
from brandassets.errors import ConfigError


def test_defaults_match_brewmind_brand() -> None:
    brand = BrandConfig()
    assert brand.name == 'BrewMind'
    assert brand.gold == '#E8A838'
    assert brand.bg_dark == '#111216'
    assert brand.text_primary == '#F0EDE8'
    assert brand.text_secondary == '#B8B0A8'
    assert brand.accent_teal == '#5AB3A0'
    assert brand.url == 'www.brewmind.app'


def test_layout_defaults() -> None:
    assert (OgLayout().width, OgLayout().height) == (1200, 630)
    assert FaviconLayout().size == 32


def test_configs_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        BrandConfig().gold = '#000000'


def test_custom_palette_is_accepted() -> None:
    brand = BrandConfig(gold='#fff', bg_dark='#000000')
    assert brand.gold == '#fff'


@pytest.mark.parametrize("value", ['E8A838', '#E8A83', 'gold', '#GGGGGG', ''])
def test_invalid_colour_is_rejected(value: str) -> None:
    with pytest.raises(ConfigError, match="accent_teal"):
        BrandConfig(accent_teal=value)


def test_empty_mark_is_rejected() -> None:
    with pytest.raises(ConfigError):
        BrandConfig(mark_paths='   ')


@pytest.mark.parametrize("size", [0, 256, -4])
def test_favicon_size_must_fit_an_ico_entry(size: int) -> None:
    with pytest.raises(ConfigError):
        FaviconLayout(size=size)


def test_og_layout_rejects_non_positive_dimensions() -> None:
    with pytest.raises(ConfigError):
        OgLayout(width=0)
    with pytest.raises(ConfigError):
        OgLayout(mark_top=-1)
