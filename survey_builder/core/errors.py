"""
Erreurs de validation du Survey Builder.

Toutes sont locales et récupérables : l'utilisateur corrige la saisie
en attente puis resoumet. Aucune n'est loguée ni rejouée en interne.
"""


class BlockValidationError(ValueError):
    """Erreur de base — `kind` est stable, `message` est le texte par défaut."""
    kind = "validation_error"
    message = "Saisie invalide."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        return str(self)


class EmptyName(BlockValidationError):
    kind = "empty_name"
    message = "Veuillez renseigner le nom du champ."


class EmptyVariant(BlockValidationError):
    kind = "empty_variant"
    message = "Veuillez choisir un type de champ."


class MissingRequiredFlag(BlockValidationError):
    kind = "missing_required_flag"
    message = "Veuillez indiquer si le champ est obligatoire."


class DuplicateButton(BlockValidationError):
    kind = "duplicate_button"
    message = "Un seul bouton est autorisé par formulaire."


class InvalidChoiceGroup(BlockValidationError):
    kind = "invalid_choice_group"
    message = "Veuillez renseigner tous les libellés des cases à cocher / boutons radio."


class EmptyDropdownOptions(BlockValidationError):
    kind = "empty_dropdown_options"
    message = "Veuillez ajouter au moins une option à la liste déroulante."


class InvalidCount(BlockValidationError):
    kind = "invalid_count"
    message = "Veuillez saisir un entier positif pour le nombre de choix."


ERROR_KINDS: dict[str, type[BlockValidationError]] = {
    cls.kind: cls
    for cls in (
        EmptyName,
        EmptyVariant,
        MissingRequiredFlag,
        DuplicateButton,
        InvalidChoiceGroup,
        EmptyDropdownOptions,
        InvalidCount,
    )
}
