"""Rasterize SVG markup to PNG bytes."""

from io import BytesIO

from PIL import Image

from .errors import RenderError


def _svg2png(svg, width, height):
    # cairosvg loads the native cairo library on import
    import cairosvg

    return cairosvg.svg2png(
        bytestring=svg.encode('utf-8'),
        output_width=width,
        output_height=height,
    )


def rasterize(svg, width, height):
    """Render `svg` to an RGBA PNG of exactly width x height pixels."""
    try:
        png_bytes = _svg2png(svg, width, height)
        with Image.open(BytesIO(png_bytes)) as raster:
            img = raster.convert('RGBA')
    except Exception as e:
        raise RenderError(f"could not rasterize SVG: {e}") from e

    if img.size != (width, height):
        img = img.resize((width, height), Image.Resampling.LANCZOS)

    out = BytesIO()
    img.save(out, format='PNG')
    return out.getvalue()
