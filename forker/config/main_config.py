"""Main Config model."""

from pydantic import BaseModel, Field

from .fork_config import ForkConfig


class Config(BaseModel):
    """Main configuration model."""

    fork: ForkConfig = Field(
        default_factory=ForkConfig,
        description="Fork behaviour",
    )
    log_level: str | None = Field(
        default=None,
        description="Log level override (falls back to the LOG_LEVEL env var)",
    )
