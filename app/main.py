# app/main.py
import uvicorn

from app.api import create_app
from app.data.database import init_db
from app.data.seed import seed
from app.utils.logging import get_logger, setup_logging
from app.utils.settings import SEED_DEMO_DATA, SERVICE_NAME

setup_logging(SERVICE_NAME)
logger = get_logger(__name__)

app = create_app()


@app.on_event("startup")
def on_startup():
    logger.info("Inicjalizacja bazy danych")
    init_db()

    if SEED_DEMO_DATA:
        created = seed()
        logger.info(f"Seed produktow demo: dodano {created}")


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
