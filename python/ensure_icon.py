#!/usr/bin/env python3
"""Materialize the embedded placeholder icon on disk when no icon exists yet."""

import argparse
import os
from pathlib import Path

from constants import (
    DEFAULT_ICON_DIR,
    DEFAULT_ICON_NAME,
    ICON_CREATED,
    ICON_EXISTS,
    ICON_DIR_FAILED,
    ICON_WRITE_FAILED,
    ICON_CHECK_FAILED,
)
from icon_data import get_icon_bytes


def ensure_icon_exists(base_dir, relative_icon_path, placeholder_bytes):
    """
    Write placeholder_bytes to base_dir/relative_icon_path unless something is already there.

    Failures never raise: the icon is cosmetic, so callers are expected to
    carry on with the build whatever status comes back.

    Args:
        base_dir: Directory the icon lives under (created if missing)
        relative_icon_path: Icon path relative to base_dir
        placeholder_bytes: Content to write when the icon is absent

    Returns:
        ICON_CREATED, ICON_EXISTS, ICON_DIR_FAILED, ICON_CHECK_FAILED
        or ICON_WRITE_FAILED
    """
    icon_path = Path(base_dir) / relative_icon_path

    try:
        icon_path.parent.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError):
        return ICON_DIR_FAILED

    # Never overwrite an existing icon, placeholder or real
    try:
        if icon_path.exists():
            return ICON_EXISTS
    except OSError:
        # e.g. the icon directory exists but cannot be searched
        return ICON_CHECK_FAILED

    created = False
    try:
        with open(icon_path, 'xb') as f:
            created = True
            f.write(placeholder_bytes)
    except FileExistsError:
        return ICON_EXISTS
    except OSError:
        if created:
            # Don't leave a truncated icon behind for the build tool
            try:
                os.remove(icon_path)
            except OSError:
                pass
        return ICON_WRITE_FAILED

    return ICON_CREATED


def main():
    parser = argparse.ArgumentParser(description="Write the placeholder icon if no icon exists yet")
    parser.add_argument("--base-dir", default=DEFAULT_ICON_DIR, metavar="<dir>", help="Icon directory")
    parser.add_argument("--icon-name", default=DEFAULT_ICON_NAME, metavar="<file>", help="Icon file name")
    args = parser.parse_args()

    status = ensure_icon_exists(args.base_dir, args.icon_name, get_icon_bytes())
    print(f"{Path(args.base_dir) / args.icon_name}: {status}")


if __name__ == "__main__":
    main()
