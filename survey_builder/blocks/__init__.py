"""
Blocs — modèle + validation.
"""
from .base import Block, PendingBlock
from .model import validate_and_create, resize_choice_group, has_button

__all__ = [
    "Block",
    "PendingBlock",
    "validate_and_create",
    "resize_choice_group",
    "has_button",
]
