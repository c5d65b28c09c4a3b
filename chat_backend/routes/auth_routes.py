# chat_backend/routes/auth_routes.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from chat_backend.dependencies import get_orchestrator
from chat_backend.errors import ChatServiceError, PersistenceError
from chat_backend.schemas import AuthResponse, LoginRequest, RegisterRequest
from chat_backend.service import ChatOrchestrator

router = APIRouter()


def _failure(exc: ChatServiceError, generic_message: str) -> JSONResponse:
    # 存储错误不暴露内部细节
    message = generic_message if isinstance(exc, PersistenceError) else exc.message
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message},
    )


@router.post("/register", response_model=AuthResponse, response_model_exclude_none=True)
def register(payload: RegisterRequest, service: ChatOrchestrator = Depends(get_orchestrator)):
    try:
        return service.register(
            full_name=payload.full_name,
            username=payload.username,
            password=payload.password,
            email=payload.email,
        )
    except ChatServiceError as exc:
        return _failure(exc, "Registration failed")


@router.post("/login", response_model=AuthResponse, response_model_exclude_none=True)
def login(payload: LoginRequest, service: ChatOrchestrator = Depends(get_orchestrator)):
    try:
        return service.login(payload.username, payload.password)
    except ChatServiceError as exc:
        return _failure(exc, "Login failed")
