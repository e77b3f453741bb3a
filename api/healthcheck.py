from fastapi import APIRouter
from utils.constants import ENGINES, PROPAGATION_MODES

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
def healthcheck():
    return {
        "status": "ok",
        "engines": list(ENGINES),
        "propagation": list(PROPAGATION_MODES),
    }
