"""Core module pour survey_builder."""
from .schemas import (
    BlockVariant,
    RequiredFlag,
    CHOICE_VARIANTS,
    REQUIRED_NOT_ASKED,
    REQUIRED_EXEMPT,
    INPUT_VARIANTS,
)
from .errors import (
    BlockValidationError,
    EmptyName,
    EmptyVariant,
    MissingRequiredFlag,
    DuplicateButton,
    InvalidChoiceGroup,
    EmptyDropdownOptions,
    InvalidCount,
    ERROR_KINDS,
)

__all__ = [
    "BlockVariant",
    "RequiredFlag",
    "CHOICE_VARIANTS",
    "REQUIRED_NOT_ASKED",
    "REQUIRED_EXEMPT",
    "INPUT_VARIANTS",
    "BlockValidationError",
    "EmptyName",
    "EmptyVariant",
    "MissingRequiredFlag",
    "DuplicateButton",
    "InvalidChoiceGroup",
    "EmptyDropdownOptions",
    "InvalidCount",
    "ERROR_KINDS",
]
