"""
Entry point: python -m goose_runner
"""

import argparse

from goose_runner.core.runtime.main_loop import MainLoop


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Goose Runner")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed spawns and particles for a repeatable run on this machine")
    parser.add_argument("--mute", action="store_true", help="Disable sound")
    parser.add_argument("--highscore-file", default=None, help="Path of the high score JSON file")
    parser.add_argument("--settings-file", default=None, help="Path of the user settings JSON file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    MainLoop(
        seed=args.seed,
        muted=args.mute,
        highscore_file=args.highscore_file,
        settings_file=args.settings_file,
    ).run()


if __name__ == "__main__":
    main()
