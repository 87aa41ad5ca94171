# src/worddies/core/errors.py
"""
Error taxonomy shared by the corpus, dictionary, dice and store layers.
"""


class WorddiesError(Exception):
    """Base class for per-message failures."""


class ResourceUnavailable(WorddiesError):
    """Corpus (or other local resource) could not be opened or read."""


class TransportError(WorddiesError):
    """The dictionary service failed (network, timeout, bad status, bad body)."""


class NotFound(WorddiesError):
    def __init__(self, word: str):
        super().__init__(f"no dictionary entry for {word!r}")
        self.word = word


class SampleExhausted(WorddiesError):
    """Sampling never landed on a usable record."""


class InvalidArgument(WorddiesError):
    """Malformed command arguments. The message is shown to the user."""


class StoreUnavailable(WorddiesError):
    """A write to the key-value store failed."""


class ValidationFailed(WorddiesError):
    """Rejected user content. The message is shown to the user."""


class ConfigError(Exception):
    """Missing or malformed process configuration. Fatal at startup."""
