from pathlib import Path

from starlette.config import Config

env_file = Path(".env")
config = Config(
    env_file=env_file if env_file.exists() else None,  # avoid warning
    env_prefix="ACCEPT_MATCH_",
)

DEFAULT_ACCEPT = config("DEFAULT_ACCEPT", default="*/*")
LOG_LEVEL = config("LOG_LEVEL", default="INFO")
