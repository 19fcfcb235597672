"""
Types de base du Survey Builder.
Variantes de blocs + drapeau « requis » à trois états.
"""
from enum import Enum


class BlockVariant(str, Enum):
    """Type de champ d'un bloc de formulaire."""
    TITLE          = "title"
    TEXT           = "text"
    DATE           = "date"
    NUMBER         = "number"
    EMAIL          = "email"
    TEXTAREA       = "textarea"
    DROPDOWN       = "dropdown"
    CHECKBOX_GROUP = "checkbox_group"
    RADIO_GROUP    = "radio_group"
    BUTTON         = "button"


class RequiredFlag(str, Enum):
    """Sélecteur « requis » : non renseigné ≠ non."""
    UNSET = "unset"
    NO    = "no"
    YES   = "yes"


# ── Groupes de variantes ────────────────────────────────────────────────────

CHOICE_VARIANTS = frozenset({BlockVariant.CHECKBOX_GROUP, BlockVariant.RADIO_GROUP})

# Variantes pour lesquelles le flag « requis » n'est jamais demandé à l'utilisateur
REQUIRED_NOT_ASKED = frozenset({
    BlockVariant.TITLE,
    BlockVariant.BUTTON,
    BlockVariant.DROPDOWN,
    *CHOICE_VARIANTS,
})

# Variantes dispensées du contrôle MissingRequiredFlag
REQUIRED_EXEMPT = frozenset({BlockVariant.TITLE, BlockVariant.BUTTON})

# Variantes rendues comme un simple <input type=...>
INPUT_VARIANTS = frozenset({
    BlockVariant.TEXT,
    BlockVariant.DATE,
    BlockVariant.NUMBER,
    BlockVariant.EMAIL,
})
