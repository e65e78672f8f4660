"""Build-time generator for the OG image and favicon."""

from .config import BrandConfig, FaviconLayout, OgLayout
from .errors import BrandAssetsError, ConfigError, IcoError, RenderError
from .ico import IconImage, build_ico, build_ico_container

__version__ = '0.1.0'
