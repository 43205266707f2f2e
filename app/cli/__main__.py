from __future__ import annotations

import argparse
import sys

from app.cli import check_word, render_puzzle

COMMANDS = {
    "render-puzzle": render_puzzle.main,
    "check-word": check_word.main,
}


def main() -> int:
    parser = argparse.ArgumentParser(description="Word search backend CLI")
    parser.add_argument("command", choices=sorted(COMMANDS), help="Command to execute")
    args, remaining = parser.parse_known_args()

    sys.argv = [args.command, *remaining]
    return COMMANDS[args.command]()


if __name__ == "__main__":
    raise SystemExit(main())
