"""
Codec configuration loaded from environment variables
"""

import codecs

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CodecSettings(BaseSettings):
    """Options for writing GPX documents (GPXKIT_* environment variables)"""

    model_config = SettingsConfigDict(env_prefix="GPXKIT_")

    pretty_print: bool = Field(default=True, description="Indent encoded output")
    xml_declaration: bool = Field(
        default=True, description="Write the <?xml ...?> declaration"
    )
    encoding: str = Field(default="UTF-8", min_length=1, description="Output encoding")
    default_creator: str = Field(
        default="gpxkit",
        min_length=1,
        description="Creator written when the document leaves it empty",
    )
    default_version: str = Field(
        default="1.1",
        description="GPX version written when the document leaves it empty",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v):
        """Ensure the encoding is one Python knows about"""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v
