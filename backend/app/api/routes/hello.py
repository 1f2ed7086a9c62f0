"""Hello: static greeting endpoint used by the frontend to check connectivity."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.schemas.envelope import ApiResponse, ok

router = APIRouter(tags=["hello"])


@router.get("/hello", response_model=ApiResponse[dict[str, str]])
async def hello():
    return JSONResponse(content=ok(
        {"greeting": "Hello from FastAPI + SQLAlchemy!"},
        "API is working correctly",
    ))
