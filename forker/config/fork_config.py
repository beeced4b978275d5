"""ForkConfig model."""

from pydantic import BaseModel, Field

from ..models import ForkOption
from .defaults import DEFAULT_FORK_OPTION, DEFAULT_TITLE


class ForkConfig(BaseModel):
    """Fork behaviour configuration."""

    default_option: ForkOption = Field(
        default=DEFAULT_FORK_OPTION,
        description="Option used when a fork request names none or an unknown one",
    )
    default_title: str = Field(
        default=DEFAULT_TITLE,
        description="Title for forks of untitled conversations",
    )
