"""
Survey Builder — assemblage interactif de formulaires par blocs typés.

Usage:
    >>> from survey_builder import FormSession, BlockVariant, RequiredFlag
    >>> session = FormSession()
    >>> session.set_name("Mon sondage")
    >>> session.set_variant(BlockVariant.TITLE)
    >>> session.add_block()
    >>> session.move_block(0, 0)

Usage (fonctions pures):
    >>> from survey_builder import PendingBlock, validate_and_create, reorder
"""

from .core.schemas import BlockVariant, RequiredFlag
from .core.errors import (
    BlockValidationError,
    EmptyName,
    EmptyVariant,
    MissingRequiredFlag,
    DuplicateButton,
    InvalidChoiceGroup,
    EmptyDropdownOptions,
    InvalidCount,
)
from .blocks import Block, PendingBlock, validate_and_create, resize_choice_group
from .reorder import reorder, pin_title, DragGesture, DragState
from .session import FormSession
from .renderer.html import render_form, render_block

__version__ = "0.1.0"

__all__ = [
    "BlockVariant", "RequiredFlag",
    "BlockValidationError", "EmptyName", "EmptyVariant", "MissingRequiredFlag",
    "DuplicateButton", "InvalidChoiceGroup", "EmptyDropdownOptions", "InvalidCount",
    "Block", "PendingBlock", "validate_and_create", "resize_choice_group",
    "reorder", "pin_title", "DragGesture", "DragState",
    "FormSession",
    "render_form", "render_block",
]
