from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

# A snippet is either one block of PHP or a list of lines.
Snippet = Union[str, List[str]]

def join_snippet(snippet: Optional[Snippet]) -> str:
    """
    Reduces a snippet (text block or list of lines) to a single text block.
    """
    if not snippet:
        return ""
    if isinstance(snippet, list):
        return "\n".join(str(line) for line in snippet)
    return str(snippet)

def _as_text(value: Any) -> str:
    """
    Renders a JSON scalar the way a header value reads in PHP land:
    null, false and zero are empty, 6.0 is '6', lists are comma-joined.
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "true"
    if isinstance(value, (int, float)):
        if value == 0:
            return ""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, list):
        return ",".join(_as_text(item) for item in value)
    return str(value)

class ComposerAuthor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    homepage: str = ""

    @field_validator("name", "homepage", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)

class ComposerExtra(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    wordpress: Dict[str, str] = Field(default_factory=dict, description="WordPress header overrides")
    main_file_prepend: Optional[Snippet] = Field(None, alias="main-file-prepend")
    main_file_append: Optional[Snippet] = Field(None, alias="main-file-append")

    @field_validator("wordpress", mode="before")
    @classmethod
    def _overrides(cls, value: Any) -> Dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {str(key): _as_text(item) for key, item in value.items()}

    @field_validator("main_file_prepend", "main_file_append", mode="before")
    @classmethod
    def _snippet(cls, value: Any) -> Optional[Snippet]:
        if value is None:
            return None
        if isinstance(value, list):
            return [_as_text(line) for line in value]
        return _as_text(value)

class ComposerManifest(BaseModel):
    """
    The parts of composer.json that feed the WordPress header block.
    """
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    version: str = ""
    description: str = ""
    homepage: str = ""
    license: str = ""
    authors: List[ComposerAuthor] = Field(default_factory=list)
    require: Dict[str, str] = Field(default_factory=dict)
    extra: ComposerExtra = Field(default_factory=ComposerExtra)

    @field_validator("name", "version", "description", "homepage", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("license", mode="before")
    @classmethod
    def _license(cls, value: Any) -> str:
        # composer accepts a single SPDX id or a list of them
        if isinstance(value, list):
            return ", ".join(_as_text(item) for item in value)
        return _as_text(value)

    @field_validator("authors", mode="before")
    @classmethod
    def _authors(cls, value: Any) -> List[Any]:
        if not isinstance(value, list):
            return []
        return [author for author in value if isinstance(author, dict)]

    @field_validator("require", mode="before")
    @classmethod
    def _require(cls, value: Any) -> Dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {str(key): _as_text(item) for key, item in value.items()}

    @field_validator("extra", mode="before")
    @classmethod
    def _extra(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}

    @property
    def first_author(self) -> ComposerAuthor:
        return self.authors[0] if self.authors else ComposerAuthor()

    @property
    def project_name(self) -> str:
        """Last path segment of the package name, e.g. 'acme/plugin' -> 'plugin'."""
        return self.name.split("/")[-1]
