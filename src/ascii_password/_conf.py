from typing import Literal

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .charset import SYMBOLS

Generator = Literal["crypto", "math"]


class Settings(BaseSettings):
    """
    Defaults for the command line front end. Values come from the environment
    (``ASCII_PASSWORD_*``), then from secret files, then from the YAML file
    passed with ``--config``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASCII_PASSWORD_",
        extra="forbid",
        validate_default=False,
    )

    min_length: int = 16
    min_upper: int = 1
    min_lower: int = 1
    min_number: int = 1
    min_symbol: int = 1
    symbols: str = SYMBOLS
    generator: Generator = "crypto"
    seed: int | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings
