# chat_backend/routes/chat_routes.py
from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from chat_backend.dependencies import get_orchestrator
from chat_backend.errors import ChatServiceError, MissingField, PersistenceError
from chat_backend.schemas import ChatEntryOut, ChatRequest, ChatResponse, StatusMessage
from chat_backend.service import ChatOrchestrator

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)  # main.py 里 prefix="/api"，所以这里就是 POST /api/chat
def chat(payload: ChatRequest, service: ChatOrchestrator = Depends(get_orchestrator)):
    try:
        reply = service.chat(payload.message, username=payload.username)
    except MissingField as exc:
        return JSONResponse(status_code=exc.status_code, content={"reply": exc.message})
    except ChatServiceError as exc:
        # 回复已经生成但没存上：按失败返回
        return JSONResponse(
            status_code=exc.status_code,
            content={"reply": "Error processing your request."},
        )

    return {"reply": reply}


@router.get("/history", response_model=List[ChatEntryOut])  # GET /api/history
def history(
    username: str | None = Query(default=None),
    service: ChatOrchestrator = Depends(get_orchestrator),
):
    try:
        return service.history(username)
    except PersistenceError as exc:
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": "History fetch failed"},
        )


@router.get("/chat/test", response_model=StatusMessage)  # GET /api/chat/test
def chat_test():
    return {"message": "Chat API is working!"}
