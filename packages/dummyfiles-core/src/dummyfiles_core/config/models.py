import codecs
import tempfile
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MarkerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    encoding: str = "latin-1"
    ignore_prefix: str = "content"

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding {v!r}") from e
        if len("é".encode(v, errors="replace")) != 1:
            raise ValueError(f"encoding {v!r} is not single-byte")
        return v


class FlattenConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    basename: str = Field(default="dummy", min_length=1)
    start_index: int = Field(default=100, ge=0)

    @field_validator("basename")
    @classmethod
    def validate_basename(cls, v: str) -> str:
        if "/" in v or "\\" in v:
            raise ValueError("basename must not contain a path separator")
        return v


class ReportConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    html_path: str = Field(
        default_factory=lambda: str(Path(tempfile.gettempdir()) / "dummy-report.html")
    )


class DummyFilesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    marker: MarkerConfig = Field(default_factory=MarkerConfig)
    flatten: FlattenConfig = Field(default_factory=FlattenConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
