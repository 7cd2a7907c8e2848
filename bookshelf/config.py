# bookshelf/config.py
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # Server
    host: str = os.getenv("BOOKSHELF_HOST", "localhost")
    port: int = int(os.getenv("BOOKSHELF_PORT", "9000"))

    # Application
    app_name: str = os.getenv("BOOKSHELF_APP_NAME", "Bookshelf API")
    app_version: str = "1.0.0"
    log_level: str = os.getenv("BOOKSHELF_LOG_LEVEL", "INFO").upper()

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


settings = Settings()
