"""Presentation layer: command line and pytest plugin."""
