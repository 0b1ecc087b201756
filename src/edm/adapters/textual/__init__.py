"""Textual front-end; ``app`` requires the ``textual`` extra."""

from .controller import HookPrinter, TextualEdmAdapter, TextualUIHooks, create_adapter

__all__ = ["HookPrinter", "TextualEdmAdapter", "TextualUIHooks", "create_adapter"]
