# src/worddies/core/dispatcher.py
"""
Command dispatch for messages addressed to the bot.

    <@bot> help
    <@bot> new [count]
    <@bot> define <word>
    <@bot> roll <count>d<sides>
    <@bot> nickname <name> | --clear
    <@bot> worddies [stop]

Each message is handled on its own. The only shared state is the Context
built at startup (corpus index, HTTP client, Redis-backed stores), none of
which is mutated here.
"""

import asyncio
import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from worddies.core.corpus import CorpusIndex
from worddies.core.dice import format_roll, parse_roll, roll
from worddies.core.errors import (
    InvalidArgument,
    NotFound,
    ResourceUnavailable,
    SampleExhausted,
    StoreUnavailable,
    TransportError,
    ValidationFailed,
)
from worddies.core.nicknames import NicknameStore, validate_nickname
from worddies.core.subscriptions import SubscriptionStore
from worddies.core.words import DictionaryClient, WordDefinition, format_definition


logger = logging.getLogger(__name__)

MAX_NEW_WORDS = 10

HELP_TEXT = """`help` - This help message.
`new [count]` - Gives you a new word of the day (up to 10 at once).
`define <word>` - Pulls up the definition for a given word.
`roll <count>d<sides>` - Rolls some dice, like `roll 3d6`.
`nickname <name>` - Tells me what to call you (`nickname --clear` to forget it).
`worddies` - Registers this channel for a daily word (`worddies stop` to leave)."""


class Command(str, Enum):
    HELP = "help"
    NEW = "new"
    DEFINE = "define"
    ROLL = "roll"
    NICKNAME = "nickname"
    WORDDIES = "worddies"


@dataclass(frozen=True)
class InboundMessage:
    content: str
    author_id: str
    mention_ids: frozenset[str] = frozenset()
    channel_id: str = ""


@dataclass(frozen=True)
class ParsedCommand:
    name: str
    args: tuple[str, ...] = ()
    remainder: str = ""


def parse_message(content: str) -> ParsedCommand | None:
    """
    Split an addressed message into command and arguments.

    The first token is the mention that addressed the bot and is dropped.
    remainder is the raw text after the command token.
    """
    parts = content.split(maxsplit=2)
    if len(parts) < 2:
        return None
    name = parts[1]
    remainder = parts[2].strip() if len(parts) > 2 else ""
    return ParsedCommand(name=name, args=tuple(remainder.split()), remainder=remainder)


@dataclass(frozen=True)
class Context:
    corpus: CorpusIndex
    dictionary: DictionaryClient
    nicknames: NicknameStore
    subscriptions: SubscriptionStore | None = None
    rng: random.Random = field(default_factory=random.Random)
    max_attempts: int | None = None  # None: resample until something resolves


async def random_word(ctx: Context) -> WordDefinition:
    """
    Sample words until one resolves to a definition with meanings.

    Misses are expected (the word list is much larger than the dictionary)
    and are retried. Corpus and transport failures propagate.
    """
    attempt = 0
    while ctx.max_attempts is None or attempt < ctx.max_attempts:
        attempt += 1
        word = await asyncio.to_thread(ctx.corpus.sample, ctx.rng)
        try:
            w = await ctx.dictionary.resolve(word)
        except NotFound:
            logger.info("'%s' could not be defined, resampling", word)
            continue
        if not w.meanings:
            logger.warning("'%s' resolved without meanings, resampling", word)
            continue
        return w

    raise SampleExhausted(f"no definable word after {ctx.max_attempts} attempts")


def closing_line(nickname: str) -> str:
    return f"Enjoy your word, {nickname}!"


class Dispatcher:
    def __init__(self, ctx: Context):
        self.ctx = ctx
        self.handlers = {
            Command.HELP: self.cmd_help,
            Command.NEW: self.cmd_new,
            Command.DEFINE: self.cmd_define,
            Command.ROLL: self.cmd_roll,
            Command.NICKNAME: self.cmd_nickname,
            Command.WORDDIES: self.cmd_worddies,
        }

    async def handle(self, message: InboundMessage) -> list[str]:
        """Return the replies for one message. Never raises for a bad message."""
        parsed = parse_message(message.content)
        if parsed is None:
            return []

        try:
            command = Command(parsed.name.lower())
        except ValueError:
            logger.warning("unknown command %s", parsed.name)
            return []

        try:
            return await self.handlers[command](message, parsed)
        except (InvalidArgument, ValidationFailed) as e:
            return [str(e)]
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("%s from %s failed", command.value, message.author_id)
            return []

    async def personalize(self, replies: list[str], user_id: str) -> list[str]:
        if not replies:
            return replies
        nickname = await self.ctx.nicknames.get(user_id)
        if nickname:
            replies[-1] = f"{replies[-1]}\n\n{closing_line(nickname)}"
        return replies

    # === Commands ===

    async def cmd_help(self, message: InboundMessage, parsed: ParsedCommand) -> list[str]:
        return [HELP_TEXT]

    async def cmd_new(self, message: InboundMessage, parsed: ParsedCommand) -> list[str]:
        count = 1
        if parsed.args:
            try:
                count = int(parsed.args[0])
            except ValueError:
                raise InvalidArgument("Usage: `new [count]`, count is a number from 1 to 10.")
            if count > MAX_NEW_WORDS:
                return [f"I can only come up with {MAX_NEW_WORDS} words at a time."]
            if count < 1:
                raise InvalidArgument("Usage: `new [count]`, count is a number from 1 to 10.")

        replies = []
        for _ in range(count):
            try:
                w = await random_word(self.ctx)
            except (ResourceUnavailable, TransportError, SampleExhausted) as e:
                logger.error("new word for %s failed: %s", message.author_id, e)
                break
            replies.append(format_definition(w))

        return await self.personalize(replies, message.author_id)

    async def cmd_define(self, message: InboundMessage, parsed: ParsedCommand) -> list[str]:
        if not parsed.args:
            raise InvalidArgument("Usage: `define <word>`")

        word = parsed.args[0]
        try:
            w = await self.ctx.dictionary.resolve(word)
        except NotFound:
            return [f"No definition found for `{word}`."]
        except TransportError as e:
            logger.error("define %s failed: %s", word, e)
            return ["The dictionary is unreachable right now, try again later."]

        return await self.personalize([format_definition(w)], message.author_id)

    async def cmd_roll(self, message: InboundMessage, parsed: ParsedCommand) -> list[str]:
        if not parsed.args:
            raise InvalidArgument("Usage: `roll <count>d<sides>`, like `roll 3d6`")

        count, sides = parse_roll(parsed.args[0])
        rolls = roll(count, sides, self.ctx.rng)
        if not rolls:
            return ["No dice, no rolls."]
        return [format_roll(rolls)]

    async def cmd_nickname(self, message: InboundMessage, parsed: ParsedCommand) -> list[str]:
        if parsed.remainder == "--clear":
            try:
                cleared = await self.ctx.nicknames.clear(message.author_id)
            except StoreUnavailable as e:
                logger.error("%s", e)
                return ["I couldn't forget your nickname, try again later."]
            return ["Forgotten." if cleared else "You didn't have a nickname."]

        name = parsed.remainder
        validate_nickname(name, len(message.mention_ids))
        try:
            await self.ctx.nicknames.set(message.author_id, name)
        except StoreUnavailable as e:
            logger.error("%s", e)
            return ["I couldn't save your nickname, try again later."]
        return [f"Nice to meet you, {name}!"]

    async def cmd_worddies(self, message: InboundMessage, parsed: ParsedCommand) -> list[str]:
        subs = self.ctx.subscriptions
        if subs is None:
            return ["Daily words are not enabled here."]

        try:
            if parsed.args and parsed.args[0].lower() == "stop":
                removed = await subs.unsubscribe(message.channel_id)
                return ["No more daily words here." if removed else "This channel wasn't registered."]
            added = await subs.subscribe(message.channel_id)
        except StoreUnavailable as e:
            logger.error("%s", e)
            return ["I couldn't update the daily word list, try again later."]
        return ["This channel will get a daily word." if added else "This channel is already registered."]
