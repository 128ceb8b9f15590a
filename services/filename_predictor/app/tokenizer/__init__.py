"""
Tokenizer module for splitting filenames into typed components.
"""

from .classifier import TokenClassifier
from .models import Component, ParsedName, RoleTag, Signature, TypeTag
from .signature import SignatureBuilder
from .tokenizer import Tokenizer

__all__ = [
    "Component",
    "ParsedName",
    "RoleTag",
    "Signature",
    "SignatureBuilder",
    "TokenClassifier",
    "Tokenizer",
    "TypeTag",
]
