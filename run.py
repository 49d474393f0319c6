#!/usr/bin/env python

from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from uvicorn.config import LOGGING_CONFIG

from app.config import get_settings

load_dotenv()

app_string = "app.main:app"

def run():
    LOGGING_CONFIG["formatters"]["default"]["fmt"] = "%(asctime)s [%(name)s] %(levelprefix)s %(message)s"
    uvicorn.run(app_string, port=get_settings().api_port, reload=True, host="0.0.0.0")


def create_log_directory():
    log_file = Path(get_settings().log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)


if __name__ == '__main__':
    create_log_directory()
    run()
