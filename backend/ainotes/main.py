import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ainotes.api import ai, auth, notes
from ainotes.storage.database import db

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("ainotes")


@asynccontextmanager
async def lifespan(app: FastAPI):
    db.create_tables()
    logger.info("AI Notes API started")
    yield
    db.dispose()


app = FastAPI(title="AI Notes API", lifespan=lifespan)

app.include_router(auth.router)
app.include_router(notes.router)
app.include_router(ai.router)


@app.get("/health")
def health():
    return {"ok": True}
