"""Core business logic layer.

Subpackages:
- calendar: mapping calendar dates onto the menu feed's week cycle
- menu: decoding the feed and building a day's category mapping
- dialog: multi-turn disclosure of categories and intent handling
- speech: spoken markup and card text rendering
"""
__all__ = ["calendar", "menu", "dialog", "speech"]
