from pydantic import BaseModel, Field
from typing import List, Optional

# prompt is optional here so that a missing or empty prompt reaches the router and gets a 400, not a 422
class AIRequest(BaseModel):
    prompt: Optional[str] = None
    model: Optional[str] = Field(default=None, description="gemini or sarvam; the default model when omitted")

class AIResponse(BaseModel):
    result: str
    model: str

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

class ModelsResponse(BaseModel):
    models: List[str]
    default: str
