"""
Router FastAPI : aperçu du moteur de rendu (adaptateur mince, hors cœur).

POST /content-renderer/render/document → DocumentRoot JSON → HTMLResponse
POST /content-renderer/render/blocks   → BlockSequence JSON → HTMLResponse
POST /content-renderer/validate        → BlockSequence JSON → {"valid": bool, "errors": [...]}
GET  /content-renderer/catalog         → blocs disponibles + leurs JSON schemas
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body
from fastapi.responses import HTMLResponse, JSONResponse

from .blocks import BLOCK_REGISTRY, parse_block
from .errors import RenderContractError
from .renderer.html import HtmlRenderer

log = logging.getLogger(__name__)

router = APIRouter(prefix="/content-renderer", tags=["content_renderer"])

_renderer = HtmlRenderer()


@router.post("/render/document", response_class=HTMLResponse, summary="Rend un champ texte riche en HTML")
def render_document(root: Optional[Dict[str, Any]] = Body(None)) -> HTMLResponse:
    """Reçoit un DocumentRoot (ou null), retourne le fragment HTML (vide si rien à rendre)."""
    return HTMLResponse(content=_renderer.render_document(root))


@router.post("/render/blocks", response_class=HTMLResponse, summary="Rend une séquence de blocs en HTML")
def render_blocks(blocks: Optional[List[Any]] = Body(None)) -> HTMLResponse:
    """Reçoit la liste de blocs d'une page (ou null), retourne le fragment HTML."""
    return HTMLResponse(content=_renderer.render_blocks(blocks))


@router.post("/validate", summary="Valide une séquence de blocs sans la rendre")
def validate(blocks: List[Any] = Body(...)) -> dict:
    """Valide chaque bloc (type connu, champs requis) ; erreurs par position."""
    errors = []
    for position, block in enumerate(blocks):
        try:
            parse_block(block, strict=True)
        except RenderContractError as e:
            errors.append({"position": position, "block_type": e.block_type, "error": str(e)})
    if errors:
        log.info("Validation : %d bloc(s) invalide(s) sur %d", len(errors), len(blocks))
    return {"valid": not errors, "errors": errors}


@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    """Retourne le catalogue des blocs avec leurs JSON schemas Pydantic."""
    catalog_data = [
        {"block_type": block_type, "schema": cls.model_json_schema()}
        for block_type, cls in BLOCK_REGISTRY.items()
    ]
    return JSONResponse({"blocks": catalog_data})
