import logging
import os

import discord
from dotenv import load_dotenv

from afrinews import NewsClient, NewsReader, ReaderResult, load_config
from afrinews.models import CATEGORIES, DEFAULT_CATEGORY, SORT_OPTIONS

# Load environment variables from .env
load_dotenv()
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Store the bot token as DISCORD_BOT_TOKEN="YOUR_BOT_TOKEN" in .env
TOKEN = os.getenv("DISCORD_BOT_TOKEN")

MAX_ARTICLES = 5
MAX_MESSAGE_LEN = 2000

intents = discord.Intents.default()
intents.message_content = True  # needed to read commands

client = discord.Client(intents=intents)
reader = None


def format_result(result: ReaderResult, heading: str) -> str:
    if not result.articles:
        return result.message or "No articles available."

    response = f"📰 {heading}\n\n"
    for article in result.articles[:MAX_ARTICLES]:
        response += f"**{article.title}**\n"
        response += f"*{article.source.name} - {article.published_at[:16].replace('T', ' ')}*\n"
        response += f"<{article.url}>\n\n"

    # Discord rejects messages over 2000 characters
    if len(response) > MAX_MESSAGE_LEN:
        response = response[:MAX_MESSAGE_LEN - 3] + "..."
    return response


@client.event
async def on_ready():
    """Called once the bot has logged in."""
    global reader
    if reader is None:
        reader = NewsReader(NewsClient(load_config()))
    print(f"Logged in as {client.user}")


@client.event
async def on_message(message):
    """Dispatch !news, !search, !sort, !sources and !refresh."""
    if message.author == client.user or reader is None:
        return

    content = message.content.strip()
    if not content.startswith("!"):
        return
    command, _, arg = content.partition(" ")
    arg = arg.strip()

    if command == "!news":
        category = arg.lower() or DEFAULT_CATEGORY
        if category not in CATEGORIES:
            await message.channel.send(f"Unknown category. Try one of: {', '.join(CATEGORIES)}")
            return
        await message.channel.send("Fetching the latest African news... one moment.")
        result = await reader.switch_category(category)
        await message.channel.send(format_result(result, f"{category.title()} news"))

    elif command == "!search":
        result = await reader.search(arg)
        await message.channel.send(format_result(result, f'Results for "{arg}"'))

    elif command == "!sort":
        if arg not in SORT_OPTIONS:
            await message.channel.send(f"Sort by one of: {', '.join(SORT_OPTIONS)}")
            return
        result = await reader.change_sort(arg)
        await message.channel.send(format_result(result, f"Sorted by {arg}"))

    elif command == "!sources":
        result = await reader.load_sources()
        await message.channel.send(format_result(result, "From major outlets"))

    elif command == "!refresh":
        reader.clear_cache()
        result = await reader.reload()
        await message.channel.send(format_result(result, "Refreshed"))


if __name__ == "__main__":
    if not TOKEN:
        raise ValueError("DISCORD_BOT_TOKEN is not set. Check your .env file.")
    client.run(TOKEN)
