import argparse
import os
import sys
from typing import List, Mapping, Optional
from dotenv import load_dotenv
from rich.markup import escape
from wpmainfile.models.settings import ActionSettings, RepoIdentity, get_boolean_input
from wpmainfile.probes.composer import load_manifest
from wpmainfile.renderer.manifest import create_manifest
from wpmainfile.renderer.engine import write_main_file
from wpmainfile.renderer.screenshot import ensure_fallback_screenshot
from wpmainfile.workflow.commands import console, set_failed, set_output

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a WordPress plugin/theme main file from composer.json")
    parser.add_argument("--main-file", help="Target file (overrides MAIN_FILE, default index.php)", default=None)
    parser.add_argument("--prepend", help="PHP inserted before the autoloader (overrides MAIN_FILE_PREPEND)", default=None)
    parser.add_argument("--append", help="PHP inserted after the autoloader (overrides MAIN_FILE_APPEND)", default=None)
    parser.add_argument("--fallback-screenshot", help="Create screenshot.png if missing (overrides FALLBACK_SCREENSHOT)", default=None)
    parser.add_argument("--repository", help="owner/repo for the GitHub URI header (overrides GITHUB_REPOSITORY)", default=None)
    parser.add_argument("--working-directory", help="Directory holding composer.json", default=None)
    return parser

def resolve_settings(args: argparse.Namespace, environ: Mapping[str, str]) -> ActionSettings:
    settings = ActionSettings.from_env(environ)
    updates = {}
    if args.main_file:
        updates["main_file"] = args.main_file
    if args.prepend is not None:
        updates["main_file_prepend"] = args.prepend
    if args.append is not None:
        updates["main_file_append"] = args.append
    if args.fallback_screenshot is not None:
        updates["fallback_screenshot"] = get_boolean_input(args.fallback_screenshot)
    if args.repository:
        updates["repository"] = RepoIdentity.parse(args.repository)
    if args.working_directory:
        updates["working_directory"] = os.path.abspath(args.working_directory)
    return settings.model_copy(update=updates)

def run(settings: ActionSettings) -> None:
    composer = load_manifest(settings.working_directory)
    manifest = create_manifest(composer, settings)

    console.print(f"[bold blue]wp-main-file[/bold blue] - Writing [cyan]{escape(settings.main_file)}[/cyan] ({manifest.artifact_type})")
    write_main_file(manifest, settings.main_file_path)
    console.print(f"[green]{escape(settings.main_file)} created successfully[/green]")
    set_output("project-name", composer.project_name, settings.github_output)

    if settings.fallback_screenshot:
        created = ensure_fallback_screenshot(settings.working_directory)
        if created:
            console.print(f"[green]Created {escape(os.path.basename(created))}[/green]")

def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if environ is None:
        load_dotenv()
        environ = os.environ

    try:
        run(resolve_settings(args, environ))
    except Exception as e:
        set_failed(str(e))
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
