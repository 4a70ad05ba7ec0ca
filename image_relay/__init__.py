"""Image relay: turns text prompts into third-party image URLs."""

__version__ = "1.0.0"
