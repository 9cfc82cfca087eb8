from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_DATA_DIR = Path(__file__).with_name("data")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LSG_", env_file=".env", extra="ignore")

    # Directory holding playlist-<year>.json; None means the bundled data
    data_dir: str | None = None

    # Supported year labels, in display order
    years: list[str] = ["2023", "2022", "2019", "2018", "2017", "2016"]
    default_year: str = "2023"

    # Playback
    watch_url_template: str = "https://www.youtube.com/watch?v={video_id}"
    embed_url_template: str = "https://www.youtube.com/embed/{video_id}"

    log_level: str = "INFO"

    def resolved_data_dir(self) -> Path:
        return Path(self.data_dir) if self.data_dir else BUNDLED_DATA_DIR


settings = Settings()
