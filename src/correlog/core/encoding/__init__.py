"""Encoders for log records."""
