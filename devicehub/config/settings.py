import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DEVICEHUB_DATABASE_URL", "sqlite:///./devicehub.db")
LOG_LEVEL = os.getenv("DEVICEHUB_LOG_LEVEL", "INFO").upper()
SQL_ECHO = os.getenv("DEVICEHUB_SQL_ECHO", "0").lower() in ("1", "true", "yes")

HOST = os.getenv("DEVICEHUB_HOST", "127.0.0.1")
PORT = int(os.getenv("DEVICEHUB_PORT", "8000"))
