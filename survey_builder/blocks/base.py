"""
Blocs de formulaire.
Block (figé, une fois ajouté à la liste) + PendingBlock (saisie en attente).
"""
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from ..core.schemas import BlockVariant, RequiredFlag


class Block(BaseModel):
    """Définition d'un champ du formulaire — immuable."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Libellé du champ")
    variant: BlockVariant
    required: bool = False
    choice_count: int = Field(default=0, ge=0)
    choice_labels: Tuple[str, ...] = ()
    options: Tuple[str, ...] = ()

    @property
    def is_title(self) -> bool:
        return self.variant == BlockVariant.TITLE

    @property
    def is_button(self) -> bool:
        return self.variant == BlockVariant.BUTTON


class PendingBlock(BaseModel):
    """Valeurs saisies par l'utilisateur, non encore validées."""
    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    variant: Optional[BlockVariant] = None
    required: RequiredFlag = RequiredFlag.UNSET
    choice_count: int = 0
    choice_labels: List[str] = Field(default_factory=list)
    options: List[str] = Field(default_factory=list)
