from fastapi import APIRouter
from bizdesk.core.config import settings

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok", "service": settings.PROJECT_NAME}
