# src/worddies/core/corpus.py
"""
Word-list corpus: count once, sample one line per call.

The file is streamed record by record in both passes, so memory use does
not grow with the corpus size (words_alpha.txt is ~370k lines).

A record is a candidate word when it decodes as UTF-8 and is non-blank
after trimming. Anything else is skipped by both the indexer and the
sampler, so total_lines always counts the same records the sampler walks.
"""

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from worddies.core.errors import ResourceUnavailable, SampleExhausted


logger = logging.getLogger(__name__)


def iter_records(path: Path) -> Iterator[str]:
    """Yield trimmed candidate records, one at a time."""
    with open(path, "rb") as f:
        for lineno, raw in enumerate(f, start=1):
            try:
                record = raw.decode("utf-8").strip()
            except UnicodeDecodeError:
                logger.debug("%s:%d: undecodable record skipped", path, lineno)
                continue
            if record:
                yield record


def count_lines(path: Path) -> int:
    try:
        total = 0
        for _ in iter_records(path):
            total += 1
        return total
    except OSError as e:
        raise ResourceUnavailable(f"cannot read corpus {path}: {e}") from e


def sample_line(path: Path, total_lines: int, rng: random.Random | None = None) -> str:
    """
    Pick a uniformly random record.

    Draws target from [0, total_lines) and scans until the running index
    reaches it. Raises SampleExhausted when the file has fewer candidates
    than total_lines claims.
    """
    if total_lines <= 0:
        raise SampleExhausted(f"corpus {path} has no candidate records")

    rng = rng or random
    target = rng.randrange(total_lines)

    try:
        for index, record in enumerate(iter_records(path)):
            if index == target:
                return record
    except OSError as e:
        raise ResourceUnavailable(f"cannot read corpus {path}: {e}") from e

    raise SampleExhausted(
        f"corpus {path} ended before record {target} (indexed {total_lines})"
    )


@dataclass(frozen=True)
class CorpusIndex:
    path: Path
    total_lines: int

    @classmethod
    def build(cls, path: str | Path) -> "CorpusIndex":
        path = Path(path)
        total = count_lines(path)
        logger.info("Indexed corpus %s: %d words", path, total)
        return cls(path=path, total_lines=total)

    def sample(self, rng: random.Random | None = None) -> str:
        return sample_line(self.path, self.total_lines, rng)
