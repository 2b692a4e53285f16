"""Exceptions for the chat completion relay.

Public API (the "studs"):
    RelayError: Base exception for all relay errors
    ConfigurationError: Missing credential or unusable configuration
    TransportError: Network or HTTP failure talking to the provider
    DecodeError: Provider body is not JSON or not the expected shape
    ProviderError: Provider-reported error (opt-in, see RelayConfig)
"""


class RelayError(Exception):
    """Base exception for all relay errors."""

    pass


class ConfigurationError(RelayError):
    """Missing credential or unusable configuration. No request was sent."""

    pass


class TransportError(RelayError):
    """The request could not be delivered or the response could not be read."""

    pass


class DecodeError(TransportError):
    """Response body is not valid JSON or does not match the completion shape."""

    pass


class ProviderError(RelayError):
    """Provider answered with an error payload instead of a completion.

    Only raised when ``raise_provider_errors`` is enabled; otherwise the
    provider's message is returned as an ordinary reply.
    """

    pass


__all__ = [
    "RelayError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "ProviderError",
]
