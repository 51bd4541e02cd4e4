from fastapi import APIRouter
from app.core import config
from app.providers import gemini, sarvam

router = APIRouter(tags=["meta"])

@router.get("/health")
def health():
    # reports which provider keys are present, never their values
    return {
        "status": "ok",
        "providers": {
            "gemini": config.get_api_key(gemini.API_KEY_ENV) is not None,
            "sarvam": config.get_api_key(sarvam.API_KEY_ENV) is not None,
        },
    }
