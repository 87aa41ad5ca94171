"""
HTTP client for the Worddies API.
"""

import os
from urllib.parse import quote

import httpx

BASE_URL = os.environ.get("WORDDIES_API", "http://localhost:8000/api")


# === Words ===

def define(word: str) -> dict:
    r = httpx.get(f"{BASE_URL}/words/{quote(word, safe='')}", timeout=30)
    r.raise_for_status()
    return r.json()


def random_word() -> dict:
    r = httpx.get(f"{BASE_URL}/words/random", timeout=120)
    r.raise_for_status()
    return r.json()


def corpus() -> dict:
    r = httpx.get(f"{BASE_URL}/corpus")
    r.raise_for_status()
    return r.json()


# === Dice ===

def roll(notation: str) -> dict:
    r = httpx.get(f"{BASE_URL}/dice/{quote(notation, safe='')}")
    r.raise_for_status()
    return r.json()


# === Nicknames ===

def get_nickname(user_id: str) -> dict | None:
    r = httpx.get(f"{BASE_URL}/nicknames/{quote(user_id, safe='')}")
    if r.status_code == 404:
        return None
    r.raise_for_status()
    return r.json()


def set_nickname(user_id: str, name: str) -> dict:
    r = httpx.put(f"{BASE_URL}/nicknames/{quote(user_id, safe='')}", json={"name": name})
    r.raise_for_status()
    return r.json()


def clear_nickname(user_id: str) -> dict:
    r = httpx.delete(f"{BASE_URL}/nicknames/{quote(user_id, safe='')}")
    r.raise_for_status()
    return r.json()
