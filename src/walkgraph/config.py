from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(RuntimeError):
    """Configuration-related error."""
    pass


# ─────────────────────────────────────────────────────────────
# Section configs
# ─────────────────────────────────────────────────────────────


class LoggingSettings(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "WARNING"
    format: str = "%(asctime)-20s %(name)-30s %(levelname)-8s: %(message)s"


class DemoSettings(BaseModel):
    """
    Defaults for the ``walkgraph`` demonstration command.

    Both can be overridden per invocation with ``--origin`` / ``--kind``.
    """

    origin: str = Field(
        "A", description="Label of the vertex both traversals start from."
    )
    kind: Literal["bfs", "dfs", "both"] = Field(
        "both", description="Which traversal(s) to run and print."
    )


# ─────────────────────────────────────────────────────────────
# Top-level settings
# ─────────────────────────────────────────────────────────────


class AppSettings(BaseSettings):
    """
    Canonical application configuration for walkgraph.

    Precedence (highest → lowest):

    1. Init kwargs (tests/overrides)
    2. Environment variables
    3. .env and .env.local
    4. Defaults in this class
    """

    model_config = SettingsConfigDict(
        env_prefix="WALKGRAPH_",  # WALKGRAPH_LOGGING__LEVEL, WALKGRAPH_DEMO__ORIGIN, ...
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    app_name: str = "walkgraph"
    debug: bool = False

    logging: LoggingSettings = LoggingSettings()
    demo: DemoSettings = DemoSettings()  # type: ignore[call-arg]


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AppSettings:
    """
    Cached accessor for process-wide settings.

    `overrides` are init kwargs → highest precedence (handy in tests).
    """
    try:
        return AppSettings(**overrides)
    except ValueError as exc:  # pydantic.ValidationError
        raise ConfigError(f"Invalid walkgraph configuration: {exc}") from exc
