"""Core formatting logic, independent of logging and tracing libraries."""
