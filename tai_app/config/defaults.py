"""Default configuration parameters for the TA-Lib facade."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HelpParams:
    """Documentation lookup parameters."""
    base_url: str = "https://madbomber.github.io/sqa-tai"    # Documentation site root
    data_file: str = ""                                      # Empty means the bundled data.json
    fetch_timeout_seconds: float = 10.0                      # HelpResource.fetch timeout
    user_agent: str = "tai-app/0.1"


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    help: HelpParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        help=HelpParams(),
        logging=LoggingParams(),
    )
