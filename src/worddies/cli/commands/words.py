"""
Word commands - via API.
"""

import sys

import httpx
from rich import print_json
from rich.console import Console

from worddies.cli import client

console = Console()


def add_subparser(subparsers):
    define_p = subparsers.add_parser("define", help="Define a word")
    define_p.add_argument("word", help="The word to look up")
    define_p.add_argument("--json", action="store_true", help="Print the raw entry")
    define_p.set_defaults(func=word_define)

    random_p = subparsers.add_parser("random", help="Pick a random word from the corpus")
    random_p.add_argument("--json", action="store_true", help="Print the raw entry")
    random_p.set_defaults(func=word_random)

    corpus_p = subparsers.add_parser("corpus", help="Show the indexed corpus")
    corpus_p.set_defaults(func=corpus_show)


def _show(entry: dict, as_json: bool):
    if as_json:
        entry = {k: v for k, v in entry.items() if k != "text"}
        print_json(data=entry)
        return
    console.print(f"[bold]{entry['word']}[/bold]" + (f"  [dim]{entry['phonetic']}[/dim]" if entry.get("phonetic") else ""))
    for m in entry["meanings"]:
        console.print(f"  [cyan]{m['partOfSpeech']}[/cyan]")
        for d in m["definitions"]:
            console.print(f"    - {d['definition']}")


def word_define(args):
    try:
        _show(client.define(args.word), args.json)
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 404:
            print(f"✗ No definition found for '{args.word}'")
        else:
            print(f"✗ Error: {e}")
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def word_random(args):
    try:
        _show(client.random_word(), args.json)
    except httpx.HTTPError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def corpus_show(args):
    try:
        info = client.corpus()
        print(f"Path:  {info['path']}")
        print(f"Words: {info['total_lines']}")
    except httpx.HTTPError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
