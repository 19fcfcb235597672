"""
Intégration FastAPI — expose une session d'édition à un front navigateur.

Usage:
    >>> from fastapi import FastAPI
    >>> app = FastAPI()
    >>> app.include_router(create_form_router())
"""
import logging
import threading
from typing import List, Optional

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from . import config
from .core.schemas import BlockVariant, RequiredFlag
from .core.errors import BlockValidationError, InvalidChoiceGroup
from .blocks.base import Block, PendingBlock
from .blocks.model import resize_choice_group
from .renderer.html import render_form
from .session import FormSession

log = logging.getLogger(__name__)


# ── Payloads ────────────────────────────────────────────────────────────────

class PendingUpdate(BaseModel):
    name: Optional[str] = None
    variant: Optional[BlockVariant] = None
    required: Optional[RequiredFlag] = None
    choice_count: Optional[int | str] = None
    choice_labels: Optional[List[str]] = None


class OptionIn(BaseModel):
    text: str


class ReorderIn(BaseModel):
    source: int
    target: int


class BlockListOut(BaseModel):
    blocks: List[Block]
    has_blocks: bool


def _error_response(e: BlockValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"error": e.kind, "detail": e.detail})


# ── Router ──────────────────────────────────────────────────────────────────

def create_form_router(session: FormSession | None = None, prefix: str = "/form") -> APIRouter:
    """
    Crée un router lié à une session d'édition (nouvelle session par défaut).

    Les endpoints sync tournent dans un threadpool : les mutations de la
    session sont sérialisées par un verrou.
    """
    session = session or FormSession()
    lock    = threading.Lock()
    router  = APIRouter(prefix=prefix, tags=["Survey Builder"])

    def _list_out() -> BlockListOut:
        return BlockListOut(blocks=list(session.blocks), has_blocks=session.has_blocks)

    @router.get("/blocks", response_model=BlockListOut)
    def list_blocks():
        return _list_out()

    @router.get("/pending", response_model=PendingBlock)
    def get_pending():
        return session.pending

    @router.patch("/pending", response_model=PendingBlock)
    def update_pending(payload: PendingUpdate):
        """
        Met à jour la saisie en attente (tout ou rien).

        Un champ absent est ignoré ; `variant: null` efface le type.
        Les libellés au-delà du nombre de choix sont refusés (422).
        """
        sent = payload.model_fields_set
        with lock:
            labels = list(session.pending.choice_labels)
            try:
                if payload.choice_count is not None:
                    labels = resize_choice_group(labels, payload.choice_count)
                if payload.choice_labels is not None:
                    if len(payload.choice_labels) > len(labels):
                        raise InvalidChoiceGroup(
                            f"{len(payload.choice_labels)} libellé(s) pour {len(labels)} choix."
                        )
                    labels[:len(payload.choice_labels)] = payload.choice_labels
            except BlockValidationError as e:
                return _error_response(e)

            if payload.choice_count is not None or payload.choice_labels is not None:
                session.set_choice_count(len(labels))
                for i, text in enumerate(labels):
                    session.set_choice_label(i, text)
            if payload.name is not None:
                session.set_name(payload.name)
            if "variant" in sent:
                session.set_variant(payload.variant)
            if payload.required is not None:
                session.set_required(payload.required)
            return session.pending

    @router.post("/pending/options", response_model=PendingBlock)
    def add_option(payload: OptionIn):
        with lock:
            session.add_option(payload.text)
            return session.pending

    @router.delete("/pending/options/{index}", response_model=PendingBlock)
    def remove_option(index: int):
        with lock:
            try:
                session.remove_option(index)
            except IndexError:
                raise HTTPException(404, f"Option introuvable : {index}")
            return session.pending

    @router.post("/blocks", status_code=201, response_model=Block)
    def add_block():
        with lock:
            try:
                return session.add_block()
            except BlockValidationError as e:
                return _error_response(e)

    @router.post("/blocks/reorder", response_model=BlockListOut)
    def reorder_blocks(payload: ReorderIn):
        with lock:
            try:
                session.move_block(payload.source, payload.target)
            except IndexError as e:
                raise HTTPException(400, str(e))
            return _list_out()

    @router.get("/preview", response_class=HTMLResponse)
    def preview():
        return HTMLResponse(render_form(session.blocks))

    return router


def create_app(session: FormSession | None = None) -> FastAPI:
    """
    App autonome, sans état global :
    `uvicorn --factory survey_builder.fastapi_integration:create_app`
    """
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    app = FastAPI(title=f"Survey Builder — {config.FORM_TITLE}", version="0.1.0")
    app.include_router(create_form_router(session))

    @app.get("/health")
    def health():
        return {"status": "ok"}

    log.info("Survey Builder prêt")
    return app

