"""List the bundled sounds and play one at random."""

from __future__ import annotations

import argparse
import sys

from floof.context import Floof, FloofError
from floof.registry import default_registry, load_directory


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="meow", description="List the available sounds and play a random one."
    )
    parser.add_argument(
        "--sounds",
        metavar="DIR",
        help="load sounds from DIR instead of the bundled ones",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        registry = load_directory(args.sounds) if args.sounds else default_registry()
        floof = Floof(registry)
    except (FloofError, OSError):
        print("Failed to initialise floof", file=sys.stderr)
        return 1

    with floof:
        count = floof.sound_count()
        print(f"libfloof has {count} embedded sound(s):")
        for index in range(count):
            print(f"  - {floof.sound_name(index)}")

        if count > 0:
            print("Playing a random cat sound...")
            try:
                floof.play_random()
            except FloofError:
                print("Playback failed!", file=sys.stderr)
            else:
                print("Press Enter to exit.")
                try:
                    input()
                except EOFError:
                    pass
        else:
            print("No sounds embedded -- drop .wav/.flac files into sounds/")
    return 0


if __name__ == "__main__":
    sys.exit(main())