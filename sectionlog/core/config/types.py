"""
Semantic Type Definitions & Validation Primitives.

Annotated aliases shared by the configuration manifests, so that malformed
values are rejected when a manifest is built rather than when a section
starts printing.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
from typing import Annotated, Literal, Union

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import AfterValidator, BeforeValidator, Field

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..logger.styles import DividerType

# =========================================================================== #
#                                VALIDATORS                                   #
# =========================================================================== #


def _coerce_divider(v: Union[str, DividerType]) -> DividerType:
    "Accept divider members or their case-insensitive names."
    if isinstance(v, str) and v.strip().upper() in DividerType.__members__:
        return DividerType.from_name(v)
    return v


def _spaces_only(v: str) -> str:
    if v.strip(" "):
        raise ValueError("indent_unit must consist of spaces only")
    return v


def _upper(v: str) -> str:
    return v.upper() if isinstance(v, str) else v


# =========================================================================== #
#                                TYPE ALIASES                                 #
# =========================================================================== #

DividerStyle = Annotated[DividerType, BeforeValidator(_coerce_divider)]
IndentUnit = Annotated[str, Field(max_length=8), AfterValidator(_spaces_only)]
LoggerName = Annotated[str, Field(min_length=1)]
LogLevel = Annotated[
    Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    BeforeValidator(_upper),
]
