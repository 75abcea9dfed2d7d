"""Configuration, logging and local storage helpers."""
