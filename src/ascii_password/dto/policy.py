from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..charset import SYMBOLS

__all__ = ("PasswordPolicy",)


class PasswordPolicy(BaseModel):
    """
    Composition rules for a generated password.

    Attributes:
        min_length: Minimum length of the generated password.
        min_upper: Minimum number of upper case letters; zero if none should be
            present.
        min_lower: Minimum number of lower case letters; zero if none should be
            present.
        min_number: Minimum number of numeric digits; zero if none should be
            present.
        min_symbol: Minimum number of special characters; zero if none should be
            present.
        allowed_symbols: Special characters to draw from. ``None`` selects
            :data:`~ascii_password.charset.SYMBOLS`. An empty value is kept as is
            and rejected by the validator when symbols are required.

    Counts are not range-checked here, see :func:`ascii_password.validate`.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    min_length: int = 0
    min_upper: int = 0
    min_lower: int = 0
    min_number: int = 0
    min_symbol: int = 0
    allowed_symbols: str | None = None

    @pydantic.field_validator("allowed_symbols", mode="before")
    @classmethod
    def join_symbols(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            if not all(isinstance(ch, str) and len(ch) == 1 for ch in value):
                raise ValueError("input must be a sequence of single characters")
            return "".join(value)
        return value

    @property
    def effective_symbols(self) -> str:
        return self.allowed_symbols or SYMBOLS

    @property
    def required(self) -> int:
        return self.min_upper + self.min_lower + self.min_number + self.min_symbol
