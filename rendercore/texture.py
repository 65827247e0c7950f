"""Readers for uncompressed 24-bit BMP images and DXT-compressed DDS textures."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import Union

__all__ = [
    "TextureError",
    "BmpImage",
    "MipLevel",
    "DdsImage",
    "parse_bmp",
    "load_bmp",
    "parse_dds",
    "load_dds",
    "FOURCC_DXT1",
    "FOURCC_DXT3",
    "FOURCC_DXT5",
    "GL_COMPRESSED_RGBA_S3TC_DXT1_EXT",
    "GL_COMPRESSED_RGBA_S3TC_DXT3_EXT",
    "GL_COMPRESSED_RGBA_S3TC_DXT5_EXT",
]

BMP_HEADER_SIZE = 54
DDS_HEADER_SIZE = 124
DDS_MAGIC = b"DDS "

FOURCC_DXT1 = 0x31545844  # "DXT1"
FOURCC_DXT3 = 0x33545844  # "DXT3"
FOURCC_DXT5 = 0x35545844  # "DXT5"

GL_COMPRESSED_RGBA_S3TC_DXT1_EXT = 0x83F1
GL_COMPRESSED_RGBA_S3TC_DXT3_EXT = 0x83F2
GL_COMPRESSED_RGBA_S3TC_DXT5_EXT = 0x83F3

_DDS_FORMATS = {
    FOURCC_DXT1: GL_COMPRESSED_RGBA_S3TC_DXT1_EXT,
    FOURCC_DXT3: GL_COMPRESSED_RGBA_S3TC_DXT3_EXT,
    FOURCC_DXT5: GL_COMPRESSED_RGBA_S3TC_DXT5_EXT,
}


class TextureError(ValueError):
    """Raised when image data is not in a supported format."""


@dataclass
class BmpImage:
    """A 24-bit BMP image; pixels are raw BGR bytes, bottom row first."""

    width: int
    height: int
    data_offset: int
    pixels: bytes


@dataclass
class MipLevel:
    """One compressed mipmap level of a DDS texture."""

    level: int
    width: int
    height: int
    data: bytes


@dataclass
class DdsImage:
    """A DXT-compressed texture with its mipmap chain."""

    width: int
    height: int
    mipmap_count: int
    four_cc: str
    gl_format: int
    block_size: int
    components: int
    levels: list[MipLevel] = field(default_factory=list)


def parse_bmp(data: bytes) -> BmpImage:
    """Parse the bytes of an uncompressed 24 bits-per-pixel BMP file."""
    data = bytes(data)
    if len(data) < BMP_HEADER_SIZE or data[:2] != b"BM":
        raise TextureError("not a correct BMP file")
    (compression,) = struct.unpack_from("<i", data, 0x1E)
    (bits,) = struct.unpack_from("<i", data, 0x1C)
    if compression != 0 or bits != 24:
        raise TextureError("not a correct BMP file: only uncompressed 24bpp is supported")

    (data_offset,) = struct.unpack_from("<I", data, 0x0A)
    (image_size,) = struct.unpack_from("<I", data, 0x22)
    (width,) = struct.unpack_from("<I", data, 0x12)
    (height,) = struct.unpack_from("<I", data, 0x16)

    # Some files leave these fields empty; fill in the obvious values.
    if image_size == 0:
        image_size = width * height * 3
    if data_offset == 0:
        data_offset = BMP_HEADER_SIZE

    # Pixel data is taken straight after the fixed-size header.
    pixels = data[BMP_HEADER_SIZE:BMP_HEADER_SIZE + image_size]
    pixels += bytes(image_size - len(pixels))
    return BmpImage(width=width, height=height, data_offset=data_offset, pixels=pixels)


def load_bmp(path: Union[str, os.PathLike]) -> BmpImage:
    """Read and parse a BMP file from disk."""
    with open(path, "rb") as handle:
        return parse_bmp(handle.read())


def parse_dds(data: bytes) -> DdsImage:
    """Parse the bytes of a DXT1, DXT3 or DXT5 DDS file."""
    data = bytes(data)
    if data[:4] != DDS_MAGIC:
        raise TextureError("not a DDS file")
    if len(data) < 4 + DDS_HEADER_SIZE:
        raise TextureError("DDS header is truncated")

    header = data[4:4 + DDS_HEADER_SIZE]
    height, width, linear_size = struct.unpack_from("<III", header, 8)
    (mipmap_count,) = struct.unpack_from("<I", header, 24)
    (four_cc,) = struct.unpack_from("<I", header, 80)

    gl_format = _DDS_FORMATS.get(four_cc)
    if gl_format is None:
        code = struct.pack("<I", four_cc).decode("latin-1")
        raise TextureError(f"unsupported DDS compression {code!r}")

    buffer_size = linear_size * 2 if mipmap_count > 1 else linear_size
    buffer = data[4 + DDS_HEADER_SIZE:4 + DDS_HEADER_SIZE + buffer_size]

    block_size = 8 if gl_format == GL_COMPRESSED_RGBA_S3TC_DXT1_EXT else 16
    components = 3 if four_cc == FOURCC_DXT1 else 4

    levels: list[MipLevel] = []
    offset = 0
    level_width, level_height = width, height
    for level in range(mipmap_count):
        if not (level_width or level_height):
            break
        size = ((level_width + 3) // 4) * ((level_height + 3) // 4) * block_size
        chunk = buffer[offset:offset + size]
        if len(chunk) != size:
            raise TextureError(f"DDS data is truncated at mipmap level {level}")
        levels.append(MipLevel(level=level, width=level_width, height=level_height, data=chunk))
        offset += size
        # Non-power-of-two sizes bottom out at 1.
        level_width = max(level_width // 2, 1)
        level_height = max(level_height // 2, 1)

    return DdsImage(
        width=width,
        height=height,
        mipmap_count=mipmap_count,
        four_cc=struct.pack("<I", four_cc).decode("latin-1"),
        gl_format=gl_format,
        block_size=block_size,
        components=components,
        levels=levels,
    )


def load_dds(path: Union[str, os.PathLike]) -> DdsImage:
    """Read and parse a DDS file from disk."""
    with open(path, "rb") as handle:
        return parse_dds(handle.read())