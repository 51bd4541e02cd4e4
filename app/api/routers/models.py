import logging
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from app.providers.base import ConfigError
from app.providers.factory import available_models, default_model
from app.schemas.ai import ErrorResponse, ModelsResponse

router = APIRouter(tags=["models"])
logger = logging.getLogger(__name__)

@router.get("/api/models", response_model=ModelsResponse, responses={500: {"model": ErrorResponse}})
def list_models():
    try:
        default = default_model()
    except ConfigError as e:
        logger.error("model listing failed: %s", e)
        return JSONResponse(status_code=500, content={"error": "Invalid model configuration", "details": str(e)})
    return ModelsResponse(models=available_models(), default=default.value)
