"""
Réordonnancement par glisser-déposer.

`reorder` est appelé à chaque survol d'un nouvel index pendant un drag :
chaque appel renvoie une liste complète et cohérente, jamais d'état
intermédiaire. Le bloc titre occupe toujours l'index 0.
"""
import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence

from .blocks.base import Block

log = logging.getLogger(__name__)


def _first_title_index(blocks: Sequence[Block]) -> Optional[int]:
    for i, b in enumerate(blocks):
        if b.is_title:
            return i
    return None


def pin_title(blocks: List[Block]) -> List[Block]:
    """Ramène le premier bloc titre en tête (en place, ordre des autres conservé)."""
    idx = _first_title_index(blocks)
    if idx:
        blocks.insert(0, blocks.pop(idx))
    return blocks


def reorder(blocks: Sequence[Block], source: int, target: int) -> List[Block]:
    """
    Déplace le bloc `source` vers `target` et renvoie une nouvelle liste.

    - source == target : no-op (copie identique)
    - bloc titre déplacé : toujours réinséré en 0, `target` ignoré
    - autre bloc : inséré en `target` (fin de liste si au-delà) ; l'index 0
      reste réservé au titre s'il y en a un
    """
    n = len(blocks)
    if not (0 <= source < n and 0 <= target < n):
        raise IndexError(f"Index hors liste : source={source}, target={target}, taille={n}")

    result = list(blocks)
    if source == target:
        return result

    moved = result.pop(source)
    if moved.is_title:
        result.insert(0, moved)
    else:
        if target == 0 and _first_title_index(result) is not None:
            target = 1
        result.insert(target, moved)
        pin_title(result)

    log.debug("reorder %d → %d (%s)", source, target, moved.variant.value)
    return result


# ── Cycle de vie d'un drag ──────────────────────────────────────────────────

class DragState(str, Enum):
    IDLE     = "idle"
    DRAGGING = "dragging"


class DragGesture:
    """
    Machine à états d'un geste de drag, indépendante de toute lib front.

    Usage:
        >>> gesture = DragGesture(session.move_block, lambda: session.blocks)
        >>> gesture.grab(3)
        >>> gesture.hover(1)
        >>> gesture.release()
    """

    def __init__(
        self,
        move: Callable[[int, int], List[Block]],
        blocks: Callable[[], Sequence[Block]],
    ):
        self._move = move
        self._blocks = blocks
        self.state = DragState.IDLE
        self.index: Optional[int] = None

    @property
    def is_dragging(self) -> bool:
        return self.state == DragState.DRAGGING

    def grab(self, index: int) -> None:
        if self.is_dragging:
            raise RuntimeError("Un drag est déjà en cours")
        n = len(self._blocks())
        if not 0 <= index < n:
            raise IndexError(f"Index hors liste : {index}, taille={n}")
        self.state = DragState.DRAGGING
        self.index = index

    def hover(self, target: int) -> Optional[List[Block]]:
        """Survol d'un index : déclenche `reorder` si la cible a changé."""
        if not self.is_dragging or target == self.index:
            return None
        dragged = self._blocks()[self.index]
        blocks = self._move(self.index, target)
        # Le titre (ou une cible réservée) peut atterrir ailleurs que sur `target`
        self.index = next(i for i, b in enumerate(blocks) if b is dragged)
        return blocks

    def release(self) -> None:
        self.state = DragState.IDLE
        self.index = None

    def cancel(self) -> None:
        # La liste reste dans son dernier état validé
        self.release()
