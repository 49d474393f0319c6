from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

class Settings(BaseSettings):
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_db: str = "dna-repair"

    jwt_secret: str = "your-secret-key-change-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24

    bcrypt_rounds: int = 12

    login_max_attempts: int = 5
    login_window_seconds: int = 15 * 60

    log_file: str = "api.log"
    api_port: int = 5000

@lru_cache()
def get_settings():
    return Settings()
