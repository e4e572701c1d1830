from fastapi import APIRouter

router = APIRouter(tags=["healthchecks"])


@router.get("/ping")
def ping() -> None:
    """Basic check that HTTP serving works. Requires no authentication."""
    return None
