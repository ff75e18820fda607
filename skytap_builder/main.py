import logging
from fastapi import FastAPI
from skytap_builder.config import LOG_LEVEL
from skytap_builder.routers import health, steps

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Skytap Build Steps")

app.include_router(steps.router, prefix="/api/v1")
app.include_router(health.router, prefix="/api/v1")
