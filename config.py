"""App configuration."""

import logging
import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, ".env"))


class Settings(BaseSettings):
    """App settings."""

    PROJECT_TITLE: str = "Userpic Server"
    PROJECT_VERSION: str = "v0"

    # Physical pixels per layout unit on the target display
    PIXEL_RATIO: float = float(os.environ.get("USERPIC_PIXEL_RATIO", "1"))

    GRAVATAR_URL: str = os.environ.get("GRAVATAR_URL", "https://www.gravatar.com/avatar")
    # Transparent result when no remote image exists for the identifier
    GRAVATAR_DEFAULT: str = os.environ.get("GRAVATAR_DEFAULT", "blank")

    DEFAULT_SOURCE_URI: str = os.environ.get("USERPIC_DEFAULT_SOURCE", "/static/default.png")

    COLOR_SCHEME: str = os.environ.get("USERPIC_COLOR_SCHEME", "light")
    DEFAULT_COLORS: dict = {
        "light": os.environ.get("USERPIC_LIGHT_COLOR", "#aeaeb2"),
        "dark": os.environ.get("USERPIC_DARK_COLOR", "#636366"),
    }

    AVATAR_SIZE: float = 50
    BADGE_SIZE: float = 20
    BADGE_LIMIT: int = int(os.environ.get("USERPIC_BADGE_LIMIT", "9"))
    BADGE_COLOR: str = "#00000000"

    # Seconds between animation frames when the server drives a spring
    FRAME_INTERVAL: float = 1 / 60

    if COLOR_SCHEME not in ("light", "dark"):
        logging.warning(f"Unknown color scheme {COLOR_SCHEME}, using light")
        COLOR_SCHEME = "light"


settings = Settings()
