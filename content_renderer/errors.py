"""Erreurs du moteur de rendu (levées uniquement en mode strict, jamais au rendu)."""
from typing import Optional


class RenderContractError(ValueError):
    """Bloc de type inconnu ou payload invalide pour son type."""

    def __init__(self, message: str, block_type: Optional[str] = None):
        super().__init__(message)
        self.block_type = block_type
