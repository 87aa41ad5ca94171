"""Dice command."""

import sys

import httpx

from worddies.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("roll", help="Roll dice, e.g. 3d6")
    parser.add_argument("notation", help="<count>d<sides>")
    parser.set_defaults(func=run_roll)


def run_roll(args):
    try:
        result = client.roll(args.notation)
    except httpx.HTTPStatusError as e:
        detail = e.response.json().get("detail") if e.response.status_code == 400 else e
        print(f"✗ Error: {detail}")
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    print(result["text"] or "No dice, no rolls.")
