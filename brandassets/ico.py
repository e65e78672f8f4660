"""
Pack PNG images into an ICO container.

ICO layout: a 6-byte header, one 16-byte directory entry per image, then the
image payloads in directory order. PNG payloads are stored verbatim.
"""

import struct
from collections import namedtuple

from .errors import IcoError

# Reserved, Type (1=icon), Count
HEADER = struct.Struct('<HHH')
# Width, Height, ColorCount, Reserved, Planes, BitCount, Size, Offset
DIR_ENTRY = struct.Struct('<BBBBHHII')

ICON_TYPE = 1
COLOR_PLANES = 1
BITS_PER_PIXEL = 32
MAX_DIMENSION = 256
MAX_IMAGES = 0xFFFF


IconImage = namedtuple('IconImage', ['data', 'size'])


class IconDirEntry(namedtuple('IconDirEntry', ['width', 'height', 'length', 'offset'])):
    """One directory record; width/height are pixel sizes, not yet encoded."""

    __slots__ = ()

    def pack(self):
        return DIR_ENTRY.pack(
            encode_dimension(self.width),
            encode_dimension(self.height),
            0,  # no palette
            0,
            COLOR_PLANES,
            BITS_PER_PIXEL,
            self.length,
            self.offset,
        )


def encode_dimension(size):
    """Single-byte width/height; 0 stands for 256."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise IcoError(f"icon dimension must be an integer, got {size!r}")
    if not 1 <= size <= MAX_DIMENSION:
        raise IcoError(f"icon dimension must be 1..{MAX_DIMENSION}, got {size}")
    return size if size < MAX_DIMENSION else 0


def _check_image(data):
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise IcoError(f"image must be bytes, got {type(data).__name__}")
    if len(data) == 0:
        raise IcoError("image is empty")


def build_ico(images):
    """Create an ICO file holding every (data, size) image, in order.

    Offsets are a running sum over the header, all directory entries and
    the payloads that precede each image.
    """
    images = [IconImage(*img) for img in images]
    if not images:
        raise IcoError("an icon needs at least one image")
    if len(images) > MAX_IMAGES:
        raise IcoError(f"too many images for one icon: {len(images)}")

    ico_data = bytearray(HEADER.pack(0, ICON_TYPE, len(images)))

    offset = HEADER.size + DIR_ENTRY.size * len(images)
    for data, size in images:
        _check_image(data)
        ico_data += IconDirEntry(size, size, len(data), offset).pack()
        offset += len(data)

    for data, _ in images:
        ico_data += data

    return bytes(ico_data)


def build_ico_container(image, size):
    """Wrap a single PNG of `size` x `size` pixels (1..255) in an ICO file.

    The payload is treated as opaque: neither its encoding nor its real
    dimensions are checked against `size`.
    """
    if encode_dimension(size) == 0:
        raise IcoError(f"size must be 1..{MAX_DIMENSION - 1}, got {size}")
    return build_ico([IconImage(image, size)])
