# src/worddies/core/words.py
"""
Dictionary lookups against dictionaryapi.dev.

GET {base}/{word} returns a JSON array of entries (one per homograph).
Only the first entry is used.
"""

import logging
from dataclasses import dataclass, field
from urllib.parse import quote

import httpx

from worddies.core.config import DICTIONARY_URL
from worddies.core.errors import NotFound, TransportError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Definition:
    definition: str
    example: str | None = None


@dataclass(frozen=True)
class Meaning:
    part_of_speech: str
    definitions: tuple[Definition, ...] = ()
    synonyms: tuple[str, ...] = ()


@dataclass(frozen=True)
class WordDefinition:
    word: str
    meanings: tuple[Meaning, ...] = field(default_factory=tuple)
    phonetic: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "WordDefinition":
        meanings = []
        for m in data.get("meanings") or []:
            definitions = tuple(
                Definition(
                    definition=d.get("definition", ""),
                    example=d.get("example"),
                )
                for d in m.get("definitions") or []
            )
            meanings.append(Meaning(
                part_of_speech=m.get("partOfSpeech", ""),
                definitions=definitions,
                synonyms=tuple(m.get("synonyms") or ()),
            ))

        return cls(
            word=data["word"],
            meanings=tuple(meanings),
            phonetic=data.get("phonetic") or None,
        )

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "phonetic": self.phonetic,
            "meanings": [
                {
                    "partOfSpeech": m.part_of_speech,
                    "definitions": [
                        {"definition": d.definition, "example": d.example}
                        for d in m.definitions
                    ],
                    "synonyms": list(m.synonyms),
                }
                for m in self.meanings
            ],
        }


class DictionaryClient:
    def __init__(self, http: httpx.AsyncClient, base_url: str = DICTIONARY_URL):
        self.http = http
        self.base_url = base_url.rstrip("/")

    def url_for(self, word: str) -> str:
        return f"{self.base_url}/{quote(word, safe='')}"

    async def resolve(self, word: str) -> WordDefinition:
        url = self.url_for(word)
        try:
            r = await self.http.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        if r.status_code == 404:
            raise NotFound(word)
        if r.status_code >= 400:
            raise TransportError(f"GET {url} returned {r.status_code}")

        try:
            body = r.json()
        except ValueError as e:
            raise TransportError(f"GET {url} returned invalid JSON") from e

        # The service answers misses with a JSON object, hits with a list
        if not isinstance(body, list) or not body:
            raise NotFound(word)

        if len(body) > 1:
            logger.debug("%s: %d entries, using the first", word, len(body))

        try:
            return WordDefinition.from_dict(body[0])
        except (KeyError, TypeError, AttributeError) as e:
            raise TransportError(f"unexpected entry shape for {word!r}: {e}") from e


def format_definition(w: WordDefinition) -> str:
    """Render a definition as chat markdown, preserving source order."""
    header = f"_**{w.word}**_"
    if w.phonetic:
        header += f" {w.phonetic}"
    lines = [header + ":"]
    for m in w.meanings:
        lines.append(f"`{m.part_of_speech}`:")
        for d in m.definitions:
            lines.append(f"  - {d.definition}")
    return "\n".join(lines)
