from typing import Dict, List
from pydantic import BaseModel, Field
from wpmainfile.models.composer import ComposerManifest, join_snippet
from wpmainfile.models.settings import ActionSettings
from wpmainfile.refinery.headers import ArtifactType, classify_artifact, resolve_headers

class RenderManifest(BaseModel):
    artifact_type: ArtifactType = "Plugin"
    headers: Dict[str, str] = Field(default_factory=dict)
    before_loader: List[str] = Field(default_factory=list, description="PHP blocks emitted before the autoloader require")
    after_loader: List[str] = Field(default_factory=list, description="PHP blocks emitted after the autoloader require")

    @property
    def is_plugin(self) -> bool:
        return self.artifact_type == "Plugin"

def create_manifest(composer: ComposerManifest, settings: ActionSettings) -> RenderManifest:
    """
    Collects everything the main file template needs: the artifact type, the
    resolved header set and the snippets around the autoloader.
    """
    artifact_type = classify_artifact(settings.main_file)
    headers = resolve_headers(composer, artifact_type, settings.repository)

    # Snippets only apply to plugins; themes get the bare header block
    if artifact_type != "Plugin":
        return RenderManifest(artifact_type=artifact_type, headers=headers)

    before = [join_snippet(composer.extra.main_file_prepend), settings.main_file_prepend]
    after = [settings.main_file_append, join_snippet(composer.extra.main_file_append)]
    return RenderManifest(
        artifact_type=artifact_type,
        headers=headers,
        before_loader=[block for block in before if block],
        after_loader=[block for block in after if block],
    )
