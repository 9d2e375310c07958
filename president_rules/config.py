"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, model_validator


class TableConfig(BaseModel):
    """Default roster for new rounds."""

    players: list[int] = [0, 1, 2, 3]
    first_player: int = 0

    @model_validator(mode="after")
    def _check_first_player(self) -> "TableConfig":
        if self.first_player not in self.players:
            raise ValueError(f"first_player {self.first_player} is not in players")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class Config(BaseModel):
    """Root configuration."""

    table: TableConfig = TableConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
