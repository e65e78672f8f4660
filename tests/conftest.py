"""Shared fixtures: make the project root importable and build small PNGs."""

import os
import sys
from io import BytesIO

import pytest
from PIL import Image

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def solid_png(width, height, r, g, b, a=255):
    """A valid RGBA PNG filled with one colour"""
    out = BytesIO()
    Image.new('RGBA', (width, height), (r, g, b, a)).save(out, format='PNG')
    return out.getvalue()


@pytest.fixture
def make_png():
    return solid_png
