"""SVG templates for the social preview image and the favicon."""

from xml.sax.saxutils import escape, quoteattr


def _num(value):
    # 540.0 -> "540", 4.8 -> "4.8"
    return f"{value:g}"


def og_image_svg(brand, layout):
    """Markup for the 1200x630 social preview image."""
    width, height = layout.width, layout.height
    mark = layout.mark_size
    mark_x = width / 2 - mark / 2
    mark_y = layout.mark_top
    center = _num(width / 2)
    font = quoteattr(brand.font_family)

    return f"""<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">
  <!-- Background -->
  <rect width="{width}" height="{height}" fill="{brand.bg_dark}"/>

  <!-- Subtle radial glow behind mark -->
  <defs>
    <radialGradient id="glow" cx="50%" cy="38%" r="35%">
      <stop offset="0%" stop-color="{brand.gold}" stop-opacity="0.08"/>
      <stop offset="100%" stop-color="{brand.gold}" stop-opacity="0"/>
    </radialGradient>
  </defs>
  <rect width="{width}" height="{height}" fill="url(#glow)"/>

  <!-- Mark -->
  <g transform="translate({_num(mark_x)}, {_num(mark_y)}) scale({_num(mark / 24)})"
     fill="none" stroke="{brand.gold}" stroke-width="1.9"
     stroke-linecap="round" stroke-linejoin="round">
    {brand.mark_paths}
  </g>

  <!-- App name -->
  <text x="{center}" y="{_num(mark_y + mark + 70)}"
        font-family={font}
        font-size="64" font-weight="700" fill="{brand.text_primary}"
        text-anchor="middle">{escape(brand.name)}</text>

  <!-- Tagline -->
  <text x="{center}" y="{_num(mark_y + mark + 120)}"
        font-family={font}
        font-size="26" font-weight="400" fill="{brand.text_secondary}"
        text-anchor="middle">{escape(brand.tagline)}</text>

  <!-- Accent line -->
  <rect x="{_num(width / 2 - 40)}" y="{_num(mark_y + mark + 140)}"
        width="80" height="3" rx="1.5" fill="{brand.accent_teal}" opacity="0.6"/>

  <!-- Footer -->
  <text x="{center}" y="{_num(height - 40)}"
        font-family={font}
        font-size="18" font-weight="500" fill="{brand.text_secondary}" opacity="0.5"
        text-anchor="middle">{escape(brand.url)}</text>
</svg>"""


def favicon_svg(brand, layout):
    """The bare mark, with thicker strokes so it survives 32px."""
    size = layout.size
    return f"""<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 24 24"
    fill="none" stroke="{brand.gold}" stroke-linecap="round" stroke-linejoin="round" stroke-width="{_num(layout.stroke_width)}">
    {brand.mark_paths}
  </svg>"""
