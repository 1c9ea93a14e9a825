from __future__ import annotations

import configparser
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .paths import get_executable_dir

CONFIG_ENV_VAR = "NVR_CHECK_CONFIG"
CONFIG_FILE_NAME = "config.ini"


class NvrConfig(BaseModel):
    port: Optional[int] = None
    verify_ssl: bool = False
    client_name: str = "nvr_check"
    user_nonce: str = ""
    user_key: str = ""
    request_timeout: float = 5.0


class PollingConfig(BaseModel):
    session_timeout: float = 10.0
    device_timeout: float = 10.0
    interval: float = 0.5


class OutputConfig(BaseModel):
    directory: Optional[str] = None
    extension: str = ".xml"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    log_file: Optional[str] = None
    max_log_size: int = 10485760
    backup_count: int = 5


class Config(BaseModel):
    nvr: NvrConfig = Field(default_factory=NvrConfig, alias="NVR")
    polling: PollingConfig = Field(default_factory=PollingConfig, alias="POLLING")
    output: OutputConfig = Field(default_factory=OutputConfig, alias="OUTPUT")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, alias="LOGGING")

    model_config = {"validate_by_name": True}

    def output_directory(self) -> Path:
        """Directory snapshots are written to, defaulting to the executable's."""
        if self.output.directory:
            return Path(self.output.directory)
        return get_executable_dir()


def get_config_path() -> Path:
    """Returns the config file location, honouring NVR_CHECK_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return get_executable_dir() / CONFIG_FILE_NAME


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load the INI config. A missing file yields the defaults."""
    if config_path is None:
        config_path = get_config_path()

    parser = configparser.ConfigParser()
    parser.read(config_path)

    # Empty values mean "unset" so they fall back to the model defaults.
    config_dict = {
        s: {k: v for k, v in parser.items(s) if v != ""} for s in parser.sections()
    }
    return Config.model_validate(config_dict)
