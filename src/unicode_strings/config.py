import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Final
from typing import Optional
from typing import final

from dotenv import load_dotenv

from unicode_strings.dialect import Dialect

DIALECT_ENV_VARIABLE = "UNICODE_STRINGS_DIALECT"

logger: Final = logging.getLogger(__name__)


def get_environment_variable_or_default(
    key: str,
    default: str | None,
) -> str | None:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def parse_dialect(key: str, value: str) -> Dialect:
    try:
        return Dialect(value.lower())
    except ValueError:
        valid_values: Final = ", ".join(f"'{dialect.value}'" for dialect in Dialect)
        raise ValueError(
            f"Environment variable '{key}' has invalid value '{value}' (expected one of {valid_values})."
        ) from None


@final
class Config:
    def __init__(self) -> None:
        self._default_dialect: Optional[Dialect] = None
        self.reload()

    @staticmethod
    def _env_file_path() -> Path:
        return Path(os.getcwd()) / ".env"

    def reload(self) -> None:
        load_dotenv(Config._env_file_path())
        dialect_name: Final = get_environment_variable_or_default(DIALECT_ENV_VARIABLE, None)
        if dialect_name is None:
            self._default_dialect = Dialect.GENERAL
            return
        self._default_dialect = parse_dialect(DIALECT_ENV_VARIABLE, dialect_name)
        logger.info(f"Using default dialect '{self._default_dialect}' from {DIALECT_ENV_VARIABLE}.")

    @property
    def default_dialect(self) -> Dialect:
        if self._default_dialect is None:
            raise AssertionError("Default dialect is not set. This should not happen.")
        return self._default_dialect


@lru_cache
def get_config() -> Config:
    return Config()
