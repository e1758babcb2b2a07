"""
Section Rendering Configuration.

Controls how debugger sections open, close and indent.
"""

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..logger.styles import DividerType, LogStyle
from .types import DividerStyle, IndentUnit


class SectionConfig(BaseModel):
    """
    Rendering policy for debugger sections.

    Attributes:
        default_divider: Divider used when `create` is called without one.
        banners: Emit the 'beginning'/'complete' lines around the dividers.
        track_indentation: Dedent remaining sections when one finishes.
        indent_unit: Whitespace prepended once per indentation level.

    Example:
        >>> cfg = SectionConfig(default_divider="thin", banners=False)
        >>> cfg.default_divider is DividerType.THIN
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_divider: DividerStyle = Field(
        default=DividerType.THICK, description="Fallback divider style"
    )
    banners: bool = Field(default=True, description="Emit begin/complete banner lines")
    track_indentation: bool = Field(
        default=True, description="Dedent sibling sections on finish"
    )
    indent_unit: IndentUnit = Field(
        default=LogStyle.INDENT, description="Whitespace per indentation level"
    )

    @field_serializer("default_divider")
    def serialize_divider(self, divider: DividerType) -> str:
        return divider.name.lower()
