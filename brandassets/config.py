"""Brand colours, copy and layout used by the SVG templates."""

import re
from dataclasses import dataclass

from .errors import ConfigError

HEX_COLOR = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')

# Same paths as favicon.svg, drawn in a 24x24 viewBox
MARK_PATHS = """
  <path d="m12 3.5 6.4 3.7v9.6L12 20.5l-6.4-3.7V7.2z"/>
  <path d="M12 7.3c2.7 0 4.6 2 4.6 4.7s-1.9 4.7-4.6 4.7-4.6-2-4.6-4.7S9.3 7.3 12 7.3"/>
  <path d="M10.9 8.1c1.6 1.8 1.6 6.1 0 7.8"/>
"""


@dataclass(frozen=True)
class BrandConfig:
    name: str = 'BrewMind'
    tagline: str = 'Jede Tasse. Perfekt begleitet.'
    url: str = 'www.brewmind.app'
    gold: str = '#E8A838'
    bg_dark: str = '#111216'
    text_primary: str = '#F0EDE8'
    text_secondary: str = '#B8B0A8'
    accent_teal: str = '#5AB3A0'
    font_family: str = 'Inter, system-ui, -apple-system, sans-serif'
    mark_paths: str = MARK_PATHS

    def __post_init__(self):
        for field in ('gold', 'bg_dark', 'text_primary', 'text_secondary', 'accent_teal'):
            value = getattr(self, field)
            if not isinstance(value, str) or not HEX_COLOR.match(value):
                raise ConfigError(f"{field} must be a hex colour like #E8A838, got {value!r}")
        if not self.mark_paths.strip():
            raise ConfigError("mark_paths is empty")


@dataclass(frozen=True)
class OgLayout:
    width: int = 1200
    height: int = 630
    mark_size: int = 120
    mark_top: int = 100

    def __post_init__(self):
        for field in ('width', 'height', 'mark_size'):
            if getattr(self, field) <= 0:
                raise ConfigError(f"{field} must be positive")
        if self.mark_top < 0:
            raise ConfigError("mark_top must not be negative")


@dataclass(frozen=True)
class FaviconLayout:
    size: int = 32
    stroke_width: float = 2.4

    def __post_init__(self):
        # ICO entries encode dimensions in a single byte
        if not 1 <= self.size <= 255:
            raise ConfigError(f"favicon size must be 1..255, got {self.size}")
        if self.stroke_width <= 0:
            raise ConfigError("stroke_width must be positive")
