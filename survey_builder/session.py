"""
Session d'édition d'un formulaire.

Détient la BlockList et la saisie en attente ; seule la session modifie
la liste (ajout de bloc, réordonnancement).
"""
import logging
from typing import List, Tuple

from .core.schemas import BlockVariant, RequiredFlag
from .core.errors import BlockValidationError
from .blocks.base import Block, PendingBlock
from .blocks.model import validate_and_create, resize_choice_group
from .reorder import DragGesture, pin_title, reorder

log = logging.getLogger(__name__)


def default_pending() -> PendingBlock:
    """Saisie vierge : type texte, « requis » à non."""
    return PendingBlock(variant=BlockVariant.TEXT, required=RequiredFlag.NO)


class FormSession:
    """
    Session d'édition (une par formulaire en cours).

    Usage:
        >>> session = FormSession()
        >>> session.set_name("Nom")
        >>> session.add_block()
        >>> session.has_blocks
        True
    """

    def __init__(self):
        self._blocks: List[Block] = []
        self.pending: PendingBlock = default_pending()
        self.has_blocks = False

    @property
    def blocks(self) -> Tuple[Block, ...]:
        return tuple(self._blocks)

    # ── Saisie en attente ───────────────────────────────────────────────────

    def set_name(self, name: str) -> None:
        self.pending.name = name

    def set_variant(self, variant: BlockVariant | None) -> None:
        self.pending.variant = variant

    def set_required(self, flag: RequiredFlag) -> None:
        self.pending.required = flag

    def set_choice_count(self, value) -> List[str]:
        """Redimensionne les libellés ; en cas d'InvalidCount la saisie reste inchangée."""
        labels = resize_choice_group(self.pending.choice_labels, value)
        self.pending.choice_count  = len(labels)
        self.pending.choice_labels = labels
        return labels

    def set_choice_label(self, index: int, text: str) -> None:
        labels = list(self.pending.choice_labels)
        labels[index] = text
        self.pending.choice_labels = labels

    def add_option(self, text: str) -> bool:
        """Ajoute une option de liste déroulante (ignorée si vide)."""
        if text.strip() == "":
            return False
        self.pending.options = [*self.pending.options, text]
        return True

    def remove_option(self, index: int) -> str:
        options = list(self.pending.options)
        removed = options.pop(index)
        self.pending.options = options
        return removed

    def reset_pending(self) -> None:
        self.pending = default_pending()

    # ── Mutations de la liste ───────────────────────────────────────────────

    def add_block(self) -> Block:
        """
        Valide la saisie en attente et ajoute le bloc en fin de liste.

        Raises:
            BlockValidationError: la liste et la saisie restent inchangées
        """
        block = validate_and_create(self.pending, self._blocks)
        self._blocks.append(block)
        pin_title(self._blocks)
        self.has_blocks = True
        self.reset_pending()
        log.info("Bloc ajouté : %s (%s) — %d bloc(s)", block.name, block.variant.value, len(self._blocks))
        return block

    def try_add_block(self) -> Block | BlockValidationError:
        """Variante sans exception : renvoie le Block ou l'erreur."""
        try:
            return self.add_block()
        except BlockValidationError as e:
            return e

    def move_block(self, source: int, target: int) -> List[Block]:
        self._blocks = reorder(self._blocks, source, target)
        return list(self._blocks)

    def start_drag(self, index: int) -> DragGesture:
        gesture = DragGesture(self.move_block, lambda: self._blocks)
        gesture.grab(index)
        return gesture
