"""Default configuration values."""

from ..constants import DEFAULT_CONVERSATION_TITLE
from ..models import ForkOption

DEFAULT_FORK_OPTION = ForkOption.DIRECT_PATH
DEFAULT_TITLE = DEFAULT_CONVERSATION_TITLE

# Config file locations, highest precedence first within the project root
CONFIG_DIRNAME = ".forker"
PROJECT_CONFIG_FILENAMES = ("forker.jsonc", "forker.json", f"{CONFIG_DIRNAME}/forker.jsonc")
GLOBAL_CONFIG_FILENAME = "forker.jsonc"
