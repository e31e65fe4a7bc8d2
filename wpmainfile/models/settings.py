import os
from typing import Any, Mapping, Optional
from pydantic import BaseModel, Field

FALSY_INPUTS = {"", "undefined", "null", "false", "0", "no", "off"}

def get_boolean_input(value: Any) -> bool:
    """
    Loose truthiness for action inputs: only a handful of spellings mean false.
    """
    if value is None:
        value = "null"
    return str(value).lower().strip() not in FALSY_INPUTS

class RepoIdentity(BaseModel):
    owner: str
    repo: str

    @classmethod
    def parse(cls, slug: Optional[str]) -> Optional["RepoIdentity"]:
        if not slug or "/" not in slug:
            return None
        owner, repo = slug.split("/", 1)
        return cls(owner=owner, repo=repo)

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

class ActionSettings(BaseModel):
    main_file: str = Field(default="index.php", description="Target file, relative to the working directory")
    main_file_prepend: str = Field(default="", description="PHP inserted before the autoloader require")
    main_file_append: str = Field(default="", description="PHP inserted after the autoloader require")
    fallback_screenshot: bool = Field(default=False, description="Create screenshot.png when none exists")
    repository: Optional[RepoIdentity] = None
    github_output: Optional[str] = Field(None, description="Path of the step output file")
    working_directory: str = Field(default_factory=os.getcwd)

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "ActionSettings":
        """
        Builds settings from an environment mapping (os.environ in production).
        """
        return cls(
            main_file=environ.get("MAIN_FILE") or "index.php",
            main_file_prepend=environ.get("MAIN_FILE_PREPEND") or "",
            main_file_append=environ.get("MAIN_FILE_APPEND") or "",
            fallback_screenshot=get_boolean_input(environ.get("FALLBACK_SCREENSHOT") or None),
            repository=RepoIdentity.parse(environ.get("GITHUB_REPOSITORY")),
            github_output=environ.get("GITHUB_OUTPUT") or None,
        )

    @property
    def main_file_path(self) -> str:
        return os.path.join(self.working_directory, self.main_file)
