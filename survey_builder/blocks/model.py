"""
Validation des blocs en attente + redimensionnement des groupes de choix.
Fonctions pures : la liste existante n'est jamais modifiée.
"""
import re
from typing import Any, Sequence

from .. import config
from ..core.schemas import (
    BlockVariant,
    RequiredFlag,
    CHOICE_VARIANTS,
    REQUIRED_EXEMPT,
    REQUIRED_NOT_ASKED,
)
from ..core.errors import (
    EmptyName,
    EmptyVariant,
    MissingRequiredFlag,
    DuplicateButton,
    InvalidChoiceGroup,
    EmptyDropdownOptions,
    InvalidCount,
)
from .base import Block, PendingBlock


def _is_blank(text: str | None) -> bool:
    return text is None or text.strip() == ""


def has_button(blocks: Sequence[Block]) -> bool:
    return any(b.variant == BlockVariant.BUTTON for b in blocks)


def validate_and_create(pending: PendingBlock, existing: Sequence[Block]) -> Block:
    """
    Valide la saisie en attente et construit un Block.

    Ordre des contrôles : nom, type, flag requis, bouton unique,
    groupe de choix, options de liste déroulante.

    Args:
        pending: Saisie en attente
        existing: Liste courante (lecture seule, pour l'unicité du bouton)

    Returns:
        Block immuable

    Raises:
        BlockValidationError: sous-classe correspondant au premier contrôle en échec
    """
    if _is_blank(pending.name):
        raise EmptyName()
    if pending.variant is None:
        raise EmptyVariant()

    variant = pending.variant
    if variant not in REQUIRED_EXEMPT and pending.required == RequiredFlag.UNSET:
        raise MissingRequiredFlag()
    if variant == BlockVariant.BUTTON and has_button(existing):
        raise DuplicateButton()

    count  = pending.choice_count
    labels = list(pending.choice_labels[:count]) if count > 0 else []
    if variant in CHOICE_VARIANTS:
        # Un libellé manquant compte comme vide
        if count <= 0 or len(labels) < count or any(_is_blank(label) for label in labels):
            raise InvalidChoiceGroup()

    if variant == BlockVariant.DROPDOWN and not pending.options:
        raise EmptyDropdownOptions()

    return Block(
        name=pending.name,
        variant=variant,
        # Flag jamais demandé pour ces variantes : toujours False
        required=variant not in REQUIRED_NOT_ASKED and pending.required == RequiredFlag.YES,
        choice_count=max(count, 0),
        choice_labels=tuple(labels),
        options=tuple(pending.options),
    )


_DIGITS = re.compile(r"^\d+$", re.ASCII)


def _parse_count(value: Any) -> int:
    # bool est un int en Python : refusé explicitement
    if isinstance(value, bool):
        raise InvalidCount()
    if isinstance(value, int):
        count = value
    elif isinstance(value, str) and _DIGITS.match(value.strip()):
        count = int(value.strip())
    else:
        raise InvalidCount()
    if count < 0 or count > config.MAX_CHOICES:
        raise InvalidCount()
    return count


def resize_choice_group(current_labels: Sequence[str], new_count: Any) -> list[str]:
    """
    Redimensionne les libellés d'un groupe de choix.

    Agrandir conserve les libellés existants (complétés par ""),
    réduire tronque.

    >>> resize_choice_group(["a", "b"], 4)
    ['a', 'b', '', '']
    """
    count = _parse_count(new_count)
    return [current_labels[i] if i < len(current_labels) else "" for i in range(count)]
