import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .constants import DIST_SUBDIR, MODEL_NAME, NEWS_SUBDIR, PORT, STATIC_ROOT, UPLOADS_SUBDIR


@dataclass(frozen=True)
class AppConfig:
    """
    Process-wide settings, built once at startup and passed to `create_app`.
    """
    gemini_api_key: str
    model_name: str = MODEL_NAME
    ui_url: str = "http://localhost:4200"
    static_root: Path = STATIC_ROOT
    port: int = PORT

    @property
    def dist_dir(self) -> Path:
        return Path(self.static_root) / DIST_SUBDIR

    @property
    def uploads_dir(self) -> Path:
        return Path(self.static_root) / UPLOADS_SUBDIR

    @property
    def news_dir(self) -> Path:
        return Path(self.static_root) / NEWS_SUBDIR

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Reads settings from `.env` and the environment.
        Raises:
            ValueError: If GEMINI_API_KEY is not set.
        """
        load_dotenv()

        gemini_api_key = os.getenv("GEMINI_API_KEY")
        if not gemini_api_key:
            raise ValueError("GEMINI_API_KEY is not set in .env")

        return cls(
            gemini_api_key=gemini_api_key,
            model_name=os.getenv("GEMINI_MODEL", MODEL_NAME),
            ui_url=os.getenv("UI_URL", "http://localhost:4200"),
            static_root=Path(os.getenv("STATIC_ROOT", str(STATIC_ROOT))),
        )
