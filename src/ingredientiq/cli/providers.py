"""Factory functions for the CLI.

Centralizes creation of the config store, credentials and chat client
from settings so the command body only deals with the conversation.
"""

import os

from rich.console import Console

from ..config import ConfigStore, ConsolePrompter, CredentialResolver, Credentials, Settings
from ..config.prompter import Prompter
from ..llm import ChatClient, create_chat_client


def get_store(settings: Settings) -> ConfigStore:
    """Create the on-disk config store.

    Environment variables:
        INGREDIENTIQ_CONFIG: Store location (default: ~/.ingredientiq/config.env)
    """
    return ConfigStore(settings.config_path)


def get_prompter(console: Console) -> Prompter:
    return ConsolePrompter(console)


def get_credentials(store: ConfigStore, prompter: Prompter, settings: Settings) -> Credentials:
    """Resolve credentials from the environment, the store, or the user.

    Raises:
        ConfigError: If no API key is available or it cannot be saved

    Environment variables:
        OPENROUTER_API_KEY: API key
        OPENROUTER_BASE_URL: API base URL (default: https://openrouter.ai/api/v1)
    """
    resolver = CredentialResolver(
        store,
        prompter,
        environ=os.environ,
        default_base_url=settings.default_base_url,
    )
    return resolver.resolve()


def get_chat_client(credentials: Credentials, settings: Settings) -> ChatClient:
    """Create the chat client.

    Environment variables:
        INGREDIENTIQ_MODEL: Model identifier (default: deepseek/deepseek-r1-distill-llama-70b)
    """
    return create_chat_client(
        credentials,
        model=settings.model,
        timeout=settings.timeout,
    )
