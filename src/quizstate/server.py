import logging
from typing import Any

import uvicorn
from fastapi import Body, FastAPI, Response

from .config import settings
from .log import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
)


# --- Routes ---
@app.post("/validate-question", status_code=201)
def validate_question(payload: Any = Body(None)):
    logger.info(f"Validation request: {payload}")
    return Response(status_code=201)


def main():
    uvicorn.run(
        "quizstate.server:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
