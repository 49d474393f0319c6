import sys
from datetime import datetime, timezone

from loguru import logger
from mongoengine import connect as _connect, disconnect as _disconnect


LOG_FORMAT = "<green>{time:YYYY-MM-DD at HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"


def connect(*, host="mongodb://localhost:27017", db="dna-repair", **kwargs):
    _connect(db=db, host=host, **kwargs)
    logger.info(f"Connected to MongoDB database {db!r}")

def disconnect():
    _disconnect()


def add_log_file(path):
    return logger.add(path, format=LOG_FORMAT, rotation="1 day", retention="30 days")


def utcnow():
    # Mongo stores naive UTC datetimes.
    return datetime.now(timezone.utc).replace(tzinfo=None)


# Reset the logger
logger.remove()

logger.add(
    sys.stderr,
    colorize=True,
    format=LOG_FORMAT,
)
