"""Exceptions raised while building brand assets."""


class BrandAssetsError(Exception):
    """Base class for asset generation failures"""


class IcoError(BrandAssetsError, ValueError):
    """Invalid input for the ICO container builder"""


class ConfigError(BrandAssetsError, ValueError):
    """Invalid brand or layout configuration"""


class RenderError(BrandAssetsError):
    """The SVG rasterizer failed"""
