from .flashcards import Classification, Flashcard

__all__ = [
    "Classification",
    "Flashcard",
]
