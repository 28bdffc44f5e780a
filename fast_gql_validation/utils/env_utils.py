import logging
import os
from typing import Optional

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def configure_env(env_file_name: Optional[str] = None) -> None:
    """
    Load environment variables before the schema is built.

    Args:
        env_file_name: Optional environment file name. If None, tries `.env.<ENV>` then `.env`.
    """
    if env_file_name is not None:
        load_dotenv(env_file_name, override=True)
        return

    environment = os.getenv("ENV", "debug")

    for env_file in [f".env.{environment}", ".env"]:
        if load_dotenv(env_file, override=True):
            logging.debug(f"Loaded {env_file} file successfully")
            break


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable, falling back to `default` for unknown values."""
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logging.warning(f"[ENV INVALID] `{name}` has unsupported value `{raw}`; using {default}")
    return default
