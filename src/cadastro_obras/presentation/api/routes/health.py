from fastapi import APIRouter

from cadastro_obras.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:  # type: ignore[misc]
    # the validator has no dependencies; the backend URL is informative only
    return {"status": "ok", "backend": settings.api_url}
