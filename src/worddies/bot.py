# src/worddies/bot.py
"""
Discord transport: turns mentions into dispatcher calls and posts the
daily word to registered channels.
"""

import logging

import discord
from discord.ext import tasks

from worddies.core.dispatcher import Context, Dispatcher, InboundMessage, random_word
from worddies.core.errors import WorddiesError
from worddies.core.words import format_definition


logger = logging.getLogger(__name__)


def to_inbound(message: discord.Message) -> InboundMessage:
    return InboundMessage(
        content=message.content or "",
        author_id=str(message.author.id),
        mention_ids=frozenset(str(u.id) for u in message.mentions),
        channel_id=str(message.channel.id),
    )


class WorddiesClient(discord.Client):
    def __init__(self, ctx: Context, daily_time=None):
        intents = discord.Intents.default()
        intents.guilds = True
        intents.messages = True
        intents.message_content = True  # must be enabled in the developer portal
        super().__init__(intents=intents, allowed_mentions=discord.AllowedMentions.none())

        self.ctx = ctx
        self.dispatcher = Dispatcher(ctx)
        if daily_time is not None:
            self.daily_word.change_interval(time=daily_time)

    async def setup_hook(self) -> None:
        if self.ctx.subscriptions is not None:
            self.daily_word.start()

    async def on_ready(self) -> None:
        logger.info("%s is connected!", self.user)

    async def on_message(self, message: discord.Message) -> None:
        if self.user is None or message.author.id == self.user.id:
            return
        if message.author.bot:
            return
        if self.user not in message.mentions:
            return

        replies = await self.dispatcher.handle(to_inbound(message))
        for text in replies:
            try:
                await message.channel.send(text)
            except discord.HTTPException as e:
                logger.error("Error sending message to %s: %s", message.channel.id, e)

    @tasks.loop(hours=24)
    async def daily_word(self) -> None:
        channels = await self.ctx.subscriptions.channels()
        if not channels:
            return

        try:
            w = await random_word(self.ctx)
        except WorddiesError as e:
            logger.error("Daily word failed: %s", e)
            return

        content = format_definition(w)
        for channel_id in channels:
            try:
                channel = self.get_channel(int(channel_id)) or await self.fetch_channel(int(channel_id))
                await channel.send(content)
            except (discord.HTTPException, ValueError) as e:
                logger.warning("Daily word to %s failed: %s", channel_id, e)

    @daily_word.before_loop
    async def before_daily_word(self) -> None:
        await self.wait_until_ready()
