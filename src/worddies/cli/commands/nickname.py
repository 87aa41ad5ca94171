"""
Nickname commands - via API.
"""

import sys

import httpx

from worddies.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("nickname", help="Nickname management")
    nick_sub = parser.add_subparsers(dest="nickname_command", required=True)

    # get
    get_p = nick_sub.add_parser("get", help="Show a user's nickname")
    get_p.add_argument("user_id", help="Chat user ID")
    get_p.set_defaults(func=nickname_get)

    # set
    set_p = nick_sub.add_parser("set", help="Set a user's nickname")
    set_p.add_argument("user_id", help="Chat user ID")
    set_p.add_argument("name", help="Nickname")
    set_p.set_defaults(func=nickname_set)

    # clear
    clear_p = nick_sub.add_parser("clear", help="Remove a user's nickname")
    clear_p.add_argument("user_id", help="Chat user ID")
    clear_p.set_defaults(func=nickname_clear)


def _fail(e: Exception):
    if isinstance(e, httpx.HTTPStatusError) and e.response.status_code in (400, 503):
        print(f"✗ Error: {e.response.json().get('detail')}")
    else:
        print(f"✗ Error: {e}")
    sys.exit(1)


def nickname_get(args):
    try:
        result = client.get_nickname(args.user_id)
    except httpx.HTTPError as e:
        _fail(e)
    if result is None:
        print("No nickname set.")
        return
    print(result["name"])


def nickname_set(args):
    try:
        result = client.set_nickname(args.user_id, args.name)
        print(f"✓ {result['user_id']} → {result['name']}")
    except httpx.HTTPError as e:
        _fail(e)


def nickname_clear(args):
    try:
        result = client.clear_nickname(args.user_id)
        print("✓ Cleared" if result["cleared"] else "No nickname set.")
    except httpx.HTTPError as e:
        _fail(e)
