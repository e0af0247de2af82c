"""SuprNews content core: article extraction and topic categorization."""

__version__ = "0.1.0"
