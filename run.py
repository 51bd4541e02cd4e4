"""
Start the AI Bot server.

USAGE:
  python run.py

Set GEMINI_API_KEY and/or SARVAM_API_KEY in .env first. A missing key only fails requests that
select that provider. API docs: http://localhost:8000/docs
"""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
