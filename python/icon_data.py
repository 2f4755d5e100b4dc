#!/usr/bin/env python3
"""Embedded ICO bytes used by the pre-build step."""

PLACEHOLDER_ICON_BYTES = bytes([
    0, 0, 1, 0, 1, 0, 1, 1, 0, 0, 1, 0, 32, 0, 48, 0,
    0, 0, 22, 0, 0, 0, 40, 0, 0, 0, 1, 0, 0, 0, 2, 0,
    0, 0, 1, 0, 32, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 255, 0,
    255, 255, 0, 0, 0, 0,
])


def get_icon_bytes():
    return PLACEHOLDER_ICON_BYTES
