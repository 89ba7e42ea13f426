from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()  # Carga las variables de entorno desde .env


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    WEB_ROOT_PATH: str = os.getenv("WEB_ROOT_PATH", "wwwroot")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))
    RELOAD: bool = _env_bool("RELOAD")

settings = Settings()

WEB_ROOT_PATH = settings.WEB_ROOT_PATH
LOG_LEVEL = settings.LOG_LEVEL
LOG_FILE = settings.LOG_FILE
HOST = settings.HOST
PORT = settings.PORT
RELOAD = settings.RELOAD
