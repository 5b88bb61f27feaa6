import logging, sys

from app.settings import LOG_LEVEL

def setup_logging(level: str = LOG_LEVEL):
    logger = logging.getLogger()
    if logger.handlers:  # don’t double add during reload
        return
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s :: %(message)s"))
    logger.addHandler(h)
    # SQL echo stays off unless someone asks for it explicitly
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
