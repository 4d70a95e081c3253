# src/constree/notation/__init__.py

from .generators import to_dotted_notation, to_list_notation, ListNotationGenerator

__all__ = [
    'to_dotted_notation',
    'to_list_notation',
    'ListNotationGenerator',
]
