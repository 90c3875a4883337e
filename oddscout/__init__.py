"""Bookmaker page scraping over WebDriver, football market parsing, odds valuation and a WebSocket broadcaster."""

__version__ = "0.1.0"