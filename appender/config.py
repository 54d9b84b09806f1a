from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    files_dir: Path = Path("static/files")
    static_dir: Path = Path("static")
    template_path: Path = BASE_DIR / "templates" / "index.html"

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    class Config:
        env_prefix = "APPENDER_"
        env_file = ".env"
