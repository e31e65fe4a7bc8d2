import os
import re
from typing import Dict, Literal, Optional
from wpmainfile.models.composer import ComposerManifest
from wpmainfile.models.settings import RepoIdentity

ArtifactType = Literal["Plugin", "Theme"]

COMPATIBLE_KEY = "Compatible up to"
# Older spellings of "Compatible up to", checked in this order
LEGACY_COMPATIBLE_KEYS = ("Tested up to", "Tested")

# Same matching rules as semver's coerce(): first run of up to three numeric parts
VERSION_RE = re.compile(r"(?:^|[^\d])(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|[^\d])")
TRAILING_ZERO_RE = re.compile(r"\.0+$")

def classify_artifact(main_file: str) -> ArtifactType:
    """
    Stylesheets (any extension ending in 'css') are themes, everything else is a plugin.
    """
    _, ext = os.path.splitext(main_file)
    return "Theme" if ext.endswith("css") else "Plugin"

def coerce_php_requirement(constraint: Optional[str]) -> str:
    """
    Turns a composer constraint into a WordPress 'Requires PHP' value.
    '^8.1' -> '8.1', '>=7.4.3' -> '7.4.3', '8.0.0' -> '8.0'.
    """
    if not constraint:
        return ""
    match = VERSION_RE.search(constraint)
    if not match:
        return ""
    major, minor, patch = (int(part or 0) for part in match.groups())
    return TRAILING_ZERO_RE.sub("", f"{major}.{minor}.{patch}", count=1)

def resolve_headers(
    manifest: ComposerManifest,
    artifact_type: ArtifactType,
    repository: Optional[RepoIdentity] = None,
) -> Dict[str, str]:
    """
    Builds the ordered WordPress header set.

    Canonical keys come first, each taking the override from extra.wordpress
    when non-empty and the composer-derived value otherwise. Remaining
    override keys follow in their original order. The legacy 'Tested up to'
    and 'Tested' keys only feed 'Compatible up to'.
    """
    overrides = manifest.extra.wordpress
    author = manifest.first_author

    def pick(key: str, default: str = "") -> str:
        return overrides.get(key) or default

    compatible = ""
    for key in (COMPATIBLE_KEY,) + LEGACY_COMPATIBLE_KEYS:
        compatible = overrides.get(key) or ""
        if compatible:
            break

    headers = {
        f"{artifact_type} Name": pick(f"{artifact_type} Name", manifest.name),
        f"{artifact_type} URI": pick(f"{artifact_type} URI", manifest.homepage),
        "Version": pick("Version", manifest.version),
        "Description": pick("Description", manifest.description),
        "Author": pick("Author", author.name),
        "Author URI": pick("Author URI", author.homepage),
        "GitHub URI": repository.slug if repository else "",
        "Remote File": pick("Remote File"),
        "Release Asset": pick("Release Asset"),
        "Remote Visibility": pick("Remote Visibility"),
        "Requires PHP": pick("Requires PHP", coerce_php_requirement(manifest.require.get("php"))),
        "Requires at least": pick("Requires at least"),
        COMPATIBLE_KEY: compatible,
        "License": pick("License", manifest.license),
        "License URI": pick("License URI"),
    }

    skipped = set(headers) | set(LEGACY_COMPATIBLE_KEYS)
    for key, value in overrides.items():
        if key not in skipped:
            headers[key] = value

    return headers
