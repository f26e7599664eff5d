"""Pydantic configuration models for docsym."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from docsym.extractors.dsl_table import (
    ATTRIBUTE_MACROS,
    TEST_ALIASES,
    TEST_BASE_SUFFIX,
    CallbackMacro,
    DslTable,
    get_default_dsl_table,
)


class ServerConfig(BaseModel):
    """MCP server configuration."""

    transport: Literal["sse", "stdio"] = "stdio"
    host: str = "127.0.0.1"
    port: int = Field(default=8766, ge=1024, le=65535)


class ParserConfig(BaseModel):
    """Parser configuration."""

    position_encoding: Literal["utf-16", "utf-8", "utf-32"] = "utf-16"
    max_file_size_kb: int = Field(default=1024, ge=1, le=10240)


class DslConfig(BaseModel):
    """Recognized DSL macros, on top of the built-in Rails table."""

    test_aliases: list[str] = Field(default_factory=lambda: list(TEST_ALIASES))
    test_base_suffix: str = TEST_BASE_SUFFIX
    extra_callbacks: list[str] = Field(default_factory=list)
    disabled_callbacks: list[str] = Field(default_factory=list)
    attribute_macros: list[str] = Field(default_factory=lambda: list(ATTRIBUTE_MACROS))

    @field_validator("test_aliases", "extra_callbacks", "disabled_callbacks", "attribute_macros")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        """Reject blank macro names."""
        if any(not name.strip() for name in v):
            raise ValueError("macro names must not be blank")
        return [name.strip() for name in v]

    def to_table(self) -> DslTable:
        """Build the lookup table handed to the outline engine."""
        table = get_default_dsl_table()
        table = table.with_callbacks(*(CallbackMacro(name=name) for name in self.extra_callbacks))
        table = table.without_callbacks(*self.disabled_callbacks)
        return table.model_copy(
            update={
                "test_aliases": frozenset(self.test_aliases),
                "test_base_suffix": self.test_base_suffix,
                "attribute_macros": frozenset(self.attribute_macros),
            }
        )


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["console", "plain", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class Config(BaseSettings):
    """Root configuration for docsym."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    dsl: DslConfig = Field(default_factory=DslConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "DOCSYM_",
        "env_nested_delimiter": "__",
    }
