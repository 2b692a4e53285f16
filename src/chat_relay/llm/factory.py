"""Factory function for creating completion handlers.

Public API (the "studs"):
    create_handler: Build a CompletionHandler from configuration
"""

from pathlib import Path

import httpx

from chat_relay.llm.completions import CompletionHandler
from chat_relay.llm.config import RelayConfig, load_config
from chat_relay.llm.providers.http import HttpTransport


def create_handler(
    config: RelayConfig | None = None,
    config_path: Path | str | None = None,
    http_client: httpx.Client | None = None,
) -> CompletionHandler:
    """Create a completion handler wired to the HTTP transport.

    Args:
        config: Explicit configuration; resolved with load_config when omitted
        config_path: YAML file passed to load_config when config is omitted
        http_client: Optional pre-built httpx client (proxies, test transports)

    Returns:
        CompletionHandler: Handler with a fresh default conversation

    Raises:
        ConfigurationError: If configuration can't be resolved

    Example:
        >>> handler = create_handler(RelayConfig(api_key="sk-..."))
        >>> reply = handler.complete("Hello")
    """
    if config is None:
        config = load_config(config_path)
    return CompletionHandler(config, transport=HttpTransport(config, client=http_client))


__all__ = ["create_handler"]
