#!/usr/bin/env python3
"""
ICO container helpers - build and parse single-image Windows icon files.

Layout (little-endian):
    ICONDIR        6 bytes: reserved (0), type (1 = icon), image count
    ICONDIRENTRY  16 bytes per image: width, height, colors, reserved,
                  planes, bit count, image size, image offset
    image data    BITMAPINFOHEADER + XOR pixels + AND mask, or a PNG stream
"""

import struct

from constants import (
    ICO_TYPE_ICON,
    ICO_TYPE_CURSOR,
    ICONDIR_SIZE,
    ICONDIRENTRY_SIZE,
    BITMAPINFOHEADER_SIZE,
)

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'

# Opaque magenta, stored as BGRA
PLACEHOLDER_PIXEL = b'\xff\x00\xff\xff'


def _mask_row_size(width):
    # 1 bit per pixel, rows padded to 32 bits
    return ((width + 31) // 32) * 4


def build_ico(width, height, bgra_pixels):
    """
    Build a single-image 32bpp BMP icon.

    Args:
        width: Image width in pixels (1-256)
        height: Image height in pixels (1-256)
        bgra_pixels: width * height * 4 bytes of bottom-up BGRA pixel data

    Returns:
        The complete ICO file as bytes
    """
    if not (1 <= width <= 256 and 1 <= height <= 256):
        raise ValueError(f"Icon dimensions must be between 1 and 256: {width}x{height}")
    if len(bgra_pixels) != width * height * 4:
        raise ValueError(
            f"Expected {width * height * 4} bytes of BGRA pixel data, got {len(bgra_pixels)}"
        )

    mask = b'\x00' * (_mask_row_size(width) * height)
    # Height is doubled in the BMP header to cover the XOR and AND bitmaps
    info = struct.pack('<IiiHHIIiiII', BITMAPINFOHEADER_SIZE, width, height * 2, 1, 32, 0, 0, 0, 0, 0, 0)
    image = info + bytes(bgra_pixels) + mask

    header = struct.pack('<HHH', 0, ICO_TYPE_ICON, 1)
    # 256 is stored as 0 in the directory entry
    entry = struct.pack(
        '<BBBBHHII',
        width % 256,
        height % 256,
        0,
        0,
        1,
        32,
        len(image),
        ICONDIR_SIZE + ICONDIRENTRY_SIZE,
    )
    return header + entry + image


def build_placeholder_ico():
    """Build the minimal 1x1 placeholder icon."""
    return build_ico(1, 1, PLACEHOLDER_PIXEL)


def parse_ico(data):
    """
    Parse an ICO/CUR container and validate its directory.

    Args:
        data: The raw file content

    Returns:
        A tuple of (header, entries). header is a dict with "type" and "count";
        entries is a list of dicts with width, height, colors, planes, bit_count,
        size, offset and format ("png" or "bmp").
    """
    if len(data) < ICONDIR_SIZE:
        raise ValueError(f"Truncated ICO header: {len(data)} bytes")

    reserved, ico_type, count = struct.unpack_from('<HHH', data, 0)
    if reserved != 0:
        raise ValueError(f"Invalid ICO header: reserved field is {reserved}, expected 0")
    if ico_type not in (ICO_TYPE_ICON, ICO_TYPE_CURSOR):
        raise ValueError(f"Invalid ICO header: unknown image type {ico_type}")
    if count == 0:
        raise ValueError("Invalid ICO header: no images")

    directory_end = ICONDIR_SIZE + count * ICONDIRENTRY_SIZE
    if len(data) < directory_end:
        raise ValueError(f"Truncated ICO directory: need {directory_end} bytes, got {len(data)}")

    entries = []
    for index in range(count):
        (
            width,
            height,
            colors,
            _,
            planes,
            bit_count,
            size,
            offset,
        ) = struct.unpack_from('<BBBBHHII', data, ICONDIR_SIZE + index * ICONDIRENTRY_SIZE)

        if offset < directory_end or offset + size > len(data):
            raise ValueError(f"Image {index + 1} lies outside the file (offset {offset}, size {size})")

        image = data[offset:offset + size]
        if image.startswith(PNG_SIGNATURE):
            image_format = "png"
        else:
            image_format = "bmp"
            if size < BITMAPINFOHEADER_SIZE:
                raise ValueError(f"Image {index + 1} is too small for a bitmap header ({size} bytes)")
            header_size = struct.unpack_from('<I', image, 0)[0]
            if header_size != BITMAPINFOHEADER_SIZE:
                raise ValueError(f"Image {index + 1} has unexpected bitmap header size {header_size}")

        entries.append(
            {
                "width": width or 256,
                "height": height or 256,
                "colors": colors,
                "planes": planes,
                "bit_count": bit_count,
                "size": size,
                "offset": offset,
                "format": image_format,
            }
        )

    header = {"type": ico_type, "count": count}
    return header, entries
