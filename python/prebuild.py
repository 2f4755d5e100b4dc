#!/usr/bin/env python3
"""
Pre-build hook - makes sure the app icon exists, then runs the real build.

Usage:
    python prebuild.py [--working-dir <dir>] -- <build command> [args...]
    python prebuild.py [--working-dir <dir>] --entry-point <module:callable>

Provisioning the icon is best-effort. The build always runs afterwards and its
outcome is the outcome of this script.
"""

import argparse
import importlib
import subprocess
import sys
from pathlib import Path

from constants import DEFAULT_ICON_DIR, DEFAULT_ICON_NAME, ICON_CREATED
from ensure_icon import ensure_icon_exists
from icon_data import get_icon_bytes


def run_build(build_entry):
    """Invoke the build entry point once. Whatever it raises propagates."""
    build_entry()


def run_prebuild(working_dir, build_entry, icon_dir=DEFAULT_ICON_DIR, icon_name=DEFAULT_ICON_NAME,
                 placeholder_bytes=None):
    """
    Provision the icon under working_dir, then hand off to build_entry.

    Args:
        working_dir: The build working directory
        build_entry: Zero-argument callable that performs the build
        icon_dir: Icon directory relative to working_dir
        icon_name: Icon file name inside icon_dir
        placeholder_bytes: Icon content to write; defaults to the embedded placeholder
    """
    if placeholder_bytes is None:
        placeholder_bytes = get_icon_bytes()

    base_dir = Path(working_dir) / icon_dir
    status = ensure_icon_exists(base_dir, icon_name, placeholder_bytes)
    if status == ICON_CREATED:
        print(f"Created placeholder icon: {base_dir / icon_name}")

    run_build(build_entry)


def make_command_delegate(command, cwd=None):
    """Return a zero-argument callable that runs command and fails on a non-zero exit."""
    command = list(command)
    if not command:
        raise ValueError("Build command must not be empty")

    def delegate():
        subprocess.run(command, cwd=cwd, check=True)

    return delegate


def load_entry_point(entry_point):
    """
    Resolve a "package.module:callable" string to the callable it names.

    Args:
        entry_point: Entry point in module:attribute form; the attribute may be dotted

    Returns:
        The callable object
    """
    module_name, sep, attr_path = entry_point.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Entry point must look like 'module:callable': {entry_point}")

    target = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError:
            raise ValueError(f"Entry point not found: {entry_point}") from None

    if not callable(target):
        raise ValueError(f"Entry point is not callable: {entry_point}")
    return target


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Ensure the app icon exists, then run the build"
    )
    parser.add_argument(
        "--working-dir",
        default=".",
        metavar="<dir>",
        help="Build working directory (default: current directory)",
    )
    parser.add_argument(
        "--icon-dir",
        default=DEFAULT_ICON_DIR,
        metavar="<dir>",
        help=f"Icon directory relative to the working directory (default: {DEFAULT_ICON_DIR})",
    )
    parser.add_argument(
        "--icon-name",
        default=DEFAULT_ICON_NAME,
        metavar="<file>",
        help=f"Icon file name (default: {DEFAULT_ICON_NAME})",
    )
    parser.add_argument(
        "--entry-point",
        metavar="<module:callable>",
        help="Python build entry point to call instead of a command",
    )
    parser.add_argument(
        "build_command",
        nargs=argparse.REMAINDER,
        help="Build command to run, after --",
    )

    args = parser.parse_args(argv)

    build_command = args.build_command
    if build_command and build_command[0] == "--":
        build_command = build_command[1:]

    if bool(build_command) == bool(args.entry_point):
        parser.error("Provide exactly one of --entry-point or a build command after --")

    try:
        if args.entry_point:
            build_entry = load_entry_point(args.entry_point)
        else:
            build_entry = make_command_delegate(build_command, cwd=args.working_dir)

        run_prebuild(
            args.working_dir,
            build_entry,
            icon_dir=args.icon_dir,
            icon_name=args.icon_name,
        )
    except subprocess.CalledProcessError as e:
        sys.exit(e.returncode)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
