"""
Worddies CLI: `run` connects the bot; `define`, `random`, `corpus`, `roll` and `nickname` call the JSON API.
"""

import argparse
from worddies.cli.commands import dice, nickname, run, words


def main():
    parser = argparse.ArgumentParser(prog="worddies", description="Worddies CLI")
    subparsers = parser.add_subparsers(dest="command")

    run.add_subparser(subparsers)
    words.add_subparser(subparsers)
    dice.add_subparser(subparsers)
    nickname.add_subparser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
