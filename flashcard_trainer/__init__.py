"""Interactive command-line flashcard trainer.

Keeps a term/definition collection in memory, quizzes on it, tracks wrong
answers per card, and saves/loads the collection as a JSON Lines file.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
