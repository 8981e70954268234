from contextlib import asynccontextmanager
import os
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from dotenv import load_dotenv

from db import engine
from catalog_routes import router as catalog_router
from riasec.routes import router as riasec_router

load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Connected to database")
    except SQLAlchemyError as e:
        # keep serving; requests will report the store failure themselves
        logger.error("Could not connect to database: %s", e)
    yield
    engine.dispose()


app = FastAPI(title="API Vocacional", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", response_class=PlainTextResponse, tags=["meta"], summary="Acknowledgement")
def root():
    return "API Vocacional funcionando ✅"


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}


app.include_router(catalog_router)
app.include_router(riasec_router)


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "4000"))
    logger.info("Serving on http://0.0.0.0:%d", port)
    uvicorn.run(app, host="0.0.0.0", port=port)
