#!/usr/bin/env python3
"""Shared constants for the icon pre-build step."""

# Icon location relative to the build working directory
DEFAULT_ICON_DIR = "icons"
DEFAULT_ICON_NAME = "icon.ico"

# ICO container layout (all fields little-endian)
ICO_TYPE_ICON = 1
ICO_TYPE_CURSOR = 2
ICONDIR_SIZE = 6
ICONDIRENTRY_SIZE = 16
BITMAPINFOHEADER_SIZE = 40

# Provisioning status values returned by ensure_icon_exists()
ICON_CREATED = "created"
ICON_EXISTS = "exists"
ICON_DIR_FAILED = "dir_failed"
ICON_WRITE_FAILED = "write_failed"
ICON_CHECK_FAILED = "check_failed"
