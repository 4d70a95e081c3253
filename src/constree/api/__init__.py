# src/constree/api/__init__.py
"""
Single-call conversion between cons-tree notations.
"""

from .converter import ConversionResult, convert_text

__all__ = [
    'ConversionResult',
    'convert_text',
]
