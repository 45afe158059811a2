"""HTTP surface for the chat core.

Authentication happens upstream; the gateway forwards the verified agent id in
a request header (``X-Agent-Id`` unless configured otherwise).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from pydantic import BaseModel

from deskbot.config import Settings
from deskbot.db import Database
from deskbot.orchestrator import ChatOrchestrator

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


class MessageRequest(BaseModel):
    message: str | None = None


class MessageResponse(BaseModel):
    response: str


class HistoryEntry(BaseModel):
    message: str
    response: str
    timestamp: str


class HistoryResponse(BaseModel):
    history: list[HistoryEntry]


def get_agent_id(request: Request) -> int:
    """Resolve the authenticated agent id forwarded by the gateway."""

    settings: Settings = request.app.state.settings
    raw = request.headers.get(settings.agent_id_header)
    if not raw:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No agent identity provided")
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid agent identity") from None


def get_orchestrator(request: Request) -> ChatOrchestrator:
    return request.app.state.orchestrator


def get_database(request: Request) -> Database:
    return request.app.state.db


@router.post("/message", response_model=MessageResponse)
async def post_message(
    payload: MessageRequest,
    agent_id: int = Depends(get_agent_id),
    orchestrator: ChatOrchestrator = Depends(get_orchestrator),
) -> MessageResponse:
    """Answer one operator message."""

    if not payload.message or not payload.message.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Message is required")
    reply = await orchestrator.handle_message(agent_id, payload.message)
    return MessageResponse(response=reply)


@router.get("/history", response_model=HistoryResponse)
def get_history(
    request: Request,
    agent_id: int = Depends(get_agent_id),
    db: Database = Depends(get_database),
) -> HistoryResponse:
    """Return the agent's recent chat turns, oldest first."""

    limit = request.app.state.settings.history_limit
    try:
        turns = db.get_chat_history(agent_id, limit=limit)
    except Exception as exc:  # noqa: BLE001
        LOGGER.error("Error fetching chat history for agent_id=%s: %s", agent_id, exc, exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")
    return HistoryResponse(
        history=[HistoryEntry(message=t.message, response=t.response, timestamp=t.timestamp) for t in turns]
    )


def create_app(settings: Settings, db: Database | None = None) -> FastAPI:
    """Build the FastAPI application around an initialized database."""

    if db is None:
        db = Database(settings.database_path)
        db.initialize()

    app = FastAPI(
        title="deskbot",
        description="Payroll and customer order questions answered over chat.",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.db = db
    app.state.orchestrator = ChatOrchestrator(db, order_limit=settings.order_result_limit)
    app.include_router(router)
    return app
