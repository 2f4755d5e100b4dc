#!/usr/bin/env python3
"""Validate icon files and the icon resources of built Windows executables."""

import argparse
from pathlib import Path

import pefile
from PIL import Image

from ico_format import parse_ico

RT_ICON = 3
RT_GROUP_ICON = 14


def get_icon_resource_counts(exe_path):
    """
    Count icon resources in a PE executable.

    Returns:
        A tuple of (group_icon_count, icon_count)
    """
    pe = pefile.PE(str(exe_path), fast_load=True)
    try:
        pe.parse_data_directories(
            directories=[pefile.DIRECTORY_ENTRY["IMAGE_DIRECTORY_ENTRY_RESOURCE"]]
        )
        resources = getattr(pe, "DIRECTORY_ENTRY_RESOURCE", None)
        counts = {RT_GROUP_ICON: 0, RT_ICON: 0}
        if resources is not None:
            for entry in resources.entries:
                if entry.id in counts and hasattr(entry, "directory"):
                    counts[entry.id] += len(entry.directory.entries)
    finally:
        pe.close()

    return counts[RT_GROUP_ICON], counts[RT_ICON]


def check_ico_file(ico_path):
    """
    Check that an .ico file parses and that Pillow can decode it.

    Returns:
        A list of (width, height, format) tuples, one per image
    """
    data = Path(ico_path).read_bytes()
    _, entries = parse_ico(data)

    with Image.open(ico_path) as image:
        if image.format != "ICO":
            raise ValueError(f"Pillow reports format {image.format}, expected ICO")
        image.load()

    return [(entry["width"], entry["height"], entry["format"]) for entry in entries]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Check .ico files and icon resources in .exe files")
    parser.add_argument("files", nargs="+", help="Icon or executable paths to inspect")
    args = parser.parse_args(argv)

    failed = False

    for file in args.files:
        path = Path(file)
        if not path.is_file():
            print(f"MISSING: {path}")
            failed = True
            continue

        if path.suffix.lower() == ".ico":
            try:
                images = check_ico_file(path)
            except Exception as e:
                print(f"INVALID: {path}: {e}")
                failed = True
                continue
            sizes = ", ".join(f"{width}x{height} {image_format}" for width, height, image_format in images)
            print(f"{path}: {len(images)} image(s) [{sizes}]")
            continue

        try:
            group_count, icon_count = get_icon_resource_counts(path)
        except pefile.PEFormatError as e:
            print(f"INVALID: {path}: {e}")
            failed = True
            continue
        print(f"{path}: RT_GROUP_ICON={group_count}, RT_ICON={icon_count}")

        if group_count == 0 or icon_count == 0:
            failed = True

    if failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
