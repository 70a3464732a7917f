"""Core infrastructure: config, storage, events, logging, CLI."""
