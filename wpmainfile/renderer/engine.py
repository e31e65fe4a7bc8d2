import os
import re
from typing import Dict
from jinja2 import Environment, FileSystemLoader
from wpmainfile.renderer.manifest import RenderManifest

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
HEADER_LINE_RE = re.compile(r"^ \* ([^:\n]+): (.*)$")

def render_main_file(manifest: RenderManifest) -> str:
    """
    Renders the plugin/theme main file for the given manifest.
    """
    # PHP must come out verbatim, so no autoescaping
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    template = env.get_template("main_file.j2")
    return template.render(manifest=manifest)

def write_main_file(manifest: RenderManifest, output_path: str) -> str:
    content = render_main_file(manifest)
    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    return output_path

def parse_header_block(content: str) -> Dict[str, str]:
    """
    Reads the ' * Key: Value' lines of the first doc comment back into an ordered dict.
    """
    headers = {}
    in_block = False
    for line in content.splitlines():
        if not in_block:
            in_block = line.startswith("/**")
            continue
        if line.strip() == "*/":
            break
        match = HEADER_LINE_RE.match(line)
        if match:
            headers[match.group(1)] = match.group(2)
    return headers
