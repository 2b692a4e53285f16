"""Command-line interface for Chat Relay."""
