"""Adapters binding the core to logging, tracing and stack handling."""
