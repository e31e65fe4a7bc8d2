import os
import base64
from typing import Optional

SCREENSHOT_EXTENSIONS = ["png", "gif", "jpg", "jpeg", "webp", "avif"]
FALLBACK_SCREENSHOT = "screenshot.png"

# 1x1 grayscale PNG
PLACEHOLDER_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR4nGNgYAAAAAMAASsJTYQAAAAASUVORK5CYII="
)

def find_screenshot(directory: str) -> Optional[str]:
    for ext in SCREENSHOT_EXTENSIONS:
        path = os.path.join(directory, f"screenshot.{ext}")
        if os.path.exists(path):
            return path
    return None

def ensure_fallback_screenshot(directory: str) -> Optional[str]:
    """
    Writes a placeholder screenshot.png unless a screenshot already exists.
    Returns the path of the created file, or None when nothing was written.
    """
    if find_screenshot(directory):
        return None

    path = os.path.join(directory, FALLBACK_SCREENSHOT)
    with open(path, "wb") as f:
        f.write(PLACEHOLDER_PNG)
    return path
