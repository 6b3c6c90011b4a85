from __future__ import annotations

from fastapi import FastAPI

from app.routes.api import router as api_router
from app.startup import configure_logging, init_database

app = FastAPI(title="vlanpool")


@app.on_event("startup")
def startup() -> None:
    configure_logging()
    init_database()


app.include_router(api_router)
