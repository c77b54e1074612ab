# main.py
import logging

from fastapi import FastAPI
from routers.products import router as products_router
from database import create_database
from config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Products API")

create_database(settings.db_file)
logger.info(f"Using product database {settings.db_file}")

app.include_router(products_router)

@app.get("/")
def root():
    return {"message": "Products API running"}
