"""Logging and tracing helpers shared by the intake app."""
