"""ForkOption enum."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ForkOption(str, Enum):
    """Which messages of the original conversation a fork carries over."""

    DIRECT_PATH = "directPath"
    INCLUDE_BRANCHES = "includeBranches"
    TARGET_LEVEL = "targetLevel"

    @classmethod
    def resolve(
        cls, value: "ForkOption | str | None", default: "ForkOption"
    ) -> "ForkOption":
        """
        Coerce a user supplied option into a ForkOption.

        Accepts members, their values ("directPath") and their names
        ("DIRECT_PATH"). Missing or unrecognised values resolve to `default`.
        """
        if value is None or value == "":
            return default
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
            if value.upper() in cls.__members__:
                return cls[value.upper()]
        logger.warning("Unrecognized fork option %r, using %s", value, default.value)
        return default
