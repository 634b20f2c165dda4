"""Standalone helper tools exposed as awesome subcommands."""
