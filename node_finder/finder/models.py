"""Data models for the finder."""

import os

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator


class PathEntry(BaseModel):
    """A resolved path.

    Attributes:
        filename: Path that exists on disk (normalized)
        directory: Whether it is a directory
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    directory: bool


class FinderSettings(BaseModel):
    """Naming conventions the finder works with.

    Attributes:
        descriptor_name: File marking a project root
        modules_dir: Name of the dependency folder
        default_extension: Appended to extension-less specifiers
        hidden_prefix: Entries starting with this are skipped when listing modules
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    descriptor_name: str = Field(default="package.json", min_length=1)
    modules_dir: str = Field(default="node_modules", min_length=1)
    default_extension: str = Field(default=".js", pattern=r"^\.[^./\\]+$")
    hidden_prefix: str = Field(default=".", min_length=1)

    @field_validator("descriptor_name", "modules_dir")
    @classmethod
    def _single_path_segment(cls, value: str) -> str:
        """Names are looked up directly inside a directory, so they must be one segment."""
        separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
        if any(sep in value for sep in separators):
            raise ValueError(f"must be a single name without path separators, got '{value}'")
        if value in (".", ".."):
            raise ValueError(f"must name an entry, got '{value}'")
        return value
