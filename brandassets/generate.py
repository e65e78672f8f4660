"""
Generate the OG image (1200x630) and favicon.ico (32x32) from SVG templates.

Usage: python -m brandassets
Writes into public/ at the project root.
"""

import sys
from pathlib import Path

from .config import BrandConfig, FaviconLayout, OgLayout
from .ico import build_ico_container
from .render import rasterize
from .svg import favicon_svg, og_image_svg

ROOT = Path(__file__).resolve().parents[1]
PUBLIC_DIR = ROOT / 'public'

OG_IMAGE_NAME = 'og-image.png'
FAVICON_NAME = 'favicon.ico'


def generate_og_image(out_dir, brand, layout=OgLayout()):
    svg = og_image_svg(brand, layout)
    output_path = Path(out_dir) / OG_IMAGE_NAME
    output_path.write_bytes(rasterize(svg, layout.width, layout.height))
    print(f"✓ OG image generated: {output_path}")
    return output_path


def generate_favicon_ico(out_dir, brand, layout=FaviconLayout()):
    """Render the mark at favicon size and wrap the PNG in an ICO file."""
    svg = favicon_svg(brand, layout)
    png_data = rasterize(svg, layout.size, layout.size)
    ico_data = build_ico_container(png_data, layout.size)

    output_path = Path(out_dir) / FAVICON_NAME
    output_path.write_bytes(ico_data)
    print(f"✓ Favicon ICO generated: {output_path} ({len(ico_data)} bytes)")
    return output_path


def generate_assets(out_dir=PUBLIC_DIR, brand=BrandConfig(), og_layout=OgLayout(),
                    favicon_layout=FaviconLayout()):
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    return [
        generate_og_image(out_dir, brand, og_layout),
        generate_favicon_ico(out_dir, brand, favicon_layout),
    ]


def main(out_dir=PUBLIC_DIR):
    try:
        generate_assets(out_dir)
    except Exception as e:
        print(f"Error generating assets: {e}", file=sys.stderr)
        return 1
    print("\nAll assets generated successfully.")
    return 0
