import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from payments_api.app.db.base import Base

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """Create the payments table if it does not exist yet.

    Runs once at startup; any connection or DDL failure is fatal.
    """
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.critical("Could not migrate database at %s", engine.url.render_as_string(hide_password=True))
        raise
    logger.info("Database schema ready")
