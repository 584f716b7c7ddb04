"""Main CLI application using Typer."""
import asyncio
import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..config import Settings
from ..conversation import Conversation, ConversationLoop
from ..errors import ApiError, IngredientIQError
from ..foodlog import FoodLogLoader
from ..prompts import load_system_prompt
from ..ui import ChatConsole, configure_logging, log_level_from_string
from .providers import get_chat_client, get_credentials, get_prompter, get_store

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ingredientiq",
    help="Analyze a food log with an LLM, then keep chatting about it",
    add_completion=False,
)

# Console for rich output
console = Console()


@app.command()
def chat(
    food_log: Path | None = typer.Argument(
        None,
        help="Food log file (default: last used file, then sample_food_log.json)"
    ),
    system_prompt: Path | None = typer.Option(
        None,
        "--system-prompt",
        "-p",
        help="File holding the system instruction (default: built-in prompt)"
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model identifier (default: $INGREDIENTIQ_MODEL or deepseek/deepseek-r1-distill-llama-70b)"
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        min=0.1,
        help="Request timeout in seconds (default: 120)"
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        "-l",
        help="Log verbosity: debug, info, warning, or error"
    ),
):
    """Analyze a food log, then chat about it until you type 'quit'."""
    configure_logging(log_level_from_string(log_level))
    view = ChatConsole(console)
    view.show_banner()

    settings = Settings.from_env(model=model, timeout=timeout)
    store = get_store(settings)
    prompter = get_prompter(console)

    try:
        credentials = get_credentials(store, prompter, settings)
        system_text = load_system_prompt(system_prompt)
        loader = FoodLogLoader(prompter, store, settings.default_food_log, console)
        path, food_log_text = loader.load(food_log)
    except IngredientIQError as e:
        view.error(str(e))
        raise typer.Exit(code=1)

    logger.info("Loaded food log from %s", path)

    async def _chat():
        async with get_chat_client(credentials, settings) as client:
            loop = ConversationLoop(
                client,
                Conversation.seed(system_text, food_log_text),
                read_input=view.read_input,
                render=view.render_reply,
                report_error=view.report_error,
            )
            view.info(f"Analyzing {path} with {client.model}...")
            try:
                await loop.run()
            except ApiError as e:
                view.report_error(e)
                raise typer.Exit(code=1)

    asyncio.run(_chat())
    view.goodbye()


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
