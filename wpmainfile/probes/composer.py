import os
import json
from pydantic import ValidationError
from wpmainfile.models.composer import ComposerManifest

COMPOSER_FILE = "composer.json"

class ManifestError(Exception):
    pass

def load_manifest(working_directory: str) -> ComposerManifest:
    """
    Reads composer.json from the working directory into a ComposerManifest.
    Raises ManifestError when the file is missing, unparsable or not an object.
    """
    path = os.path.join(working_directory, COMPOSER_FILE)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise ManifestError(f"{COMPOSER_FILE} not found in {working_directory}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Could not parse {COMPOSER_FILE}: {e}") from e

    if not isinstance(raw, dict):
        raise ManifestError(f"{COMPOSER_FILE} must contain a JSON object")

    try:
        return ComposerManifest.model_validate(raw)
    except ValidationError as e:
        raise ManifestError(f"Invalid {COMPOSER_FILE}: {e}") from e
