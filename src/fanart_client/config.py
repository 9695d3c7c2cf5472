"""
Configuration constants for the Fanart.tv client.

This module centralizes the endpoint templates, timeouts and logging
parameters so they can be tuned in one place.
"""

from pathlib import Path
from dataclasses import dataclass, field


@dataclass
class APIConfig:
    """API configuration settings."""
    base_url: str = "http://api.fanart.tv/webservice/movie"

    # Path templates appended to base_url
    plain_path_template: str = "/{api_key}/{movie_id}/{format}/"
    full_path_template: str = "/{api_key}/{format}/{category}/{sort}/{limit}/{format}/"

    timeout_seconds: float = 10.0
    user_agent: str = "fanart-client/0.1"


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "fanart_client.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
