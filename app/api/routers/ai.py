import logging
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from app.schemas.ai import AIRequest, AIResponse, ErrorResponse
from app.providers.factory import UnknownModelError
from app.services.ai_service import ValidationError, generate_response

router = APIRouter(tags=["ai"])
logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to generate AI response"


@router.post(
    "/api/ai",
    response_model=AIResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_ai(req: AIRequest):
    try:
        text, model = await generate_response(req.prompt, req.model)
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except UnknownModelError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        # every adapter failure leaves the API in one shape; provider details only go to `details`
        logger.error(
            "AI generation failed: type=%s status=%s message=%s",
            type(e).__name__, getattr(e, "status", None), e,
        )
        return JSONResponse(status_code=500, content={"error": FAILURE_MESSAGE, "details": str(e)})

    return AIResponse(result=text, model=model.value)
