# src/constree/validator/__init__.py

from .input_classifier import InputStatus, ClassificationResult, classify_input

__all__ = [
    'InputStatus',
    'ClassificationResult',
    'classify_input',
]
