import json
from wpmainfile.main import main
from wpmainfile.renderer.screenshot import PLACEHOLDER_PNG
from wpmainfile.workflow.commands import set_failed, set_output

EXAMPLE_COMPOSER = {"name": "acme/plugin", "version": "1.2.0", "require": {"php": "^8.1.0"}}

def write_composer(path, data):
    (path / "composer.json").write_text(json.dumps(data))

def run_action(tmp_path, **env):
    environ = {"GITHUB_REPOSITORY": "acme/plugin", "GITHUB_OUTPUT": str(tmp_path / "output.txt")}
    environ.update(env)
    return main(["--working-directory", str(tmp_path)], environ=environ)

def test_generates_plugin_main_file(tmp_path):
    write_composer(tmp_path, EXAMPLE_COMPOSER)
    assert run_action(tmp_path) == 0

    content = (tmp_path / "index.php").read_text()
    assert content == (
        "<?php\n\n"
        "/**\n"
        " * Plugin Name: acme/plugin\n"
        " * Version: 1.2.0\n"
        " * GitHub URI: acme/plugin\n"
        " * Requires PHP: 8.1\n"
        " */\n\n"
        "defined( 'ABSPATH' ) || exit;\n\n"
        "require __DIR__ . '/vendor/autoload.php';\n\n"
    )
    assert (tmp_path / "output.txt").read_text() == "project-name=plugin\n"
    assert not (tmp_path / "screenshot.png").exists()

def test_generates_theme_stylesheet(tmp_path, capsys):
    write_composer(tmp_path, {"name": "acme/theme", "extra": {"wordpress": {"Tested up to": "6.4"}}})
    assert run_action(tmp_path, MAIN_FILE="style.css", MAIN_FILE_PREPEND="// ignored") == 0

    content = (tmp_path / "style.css").read_text()
    assert content.startswith("/**\n * Theme Name: acme/theme\n")
    assert " * Compatible up to: 6.4\n" in content
    assert "ABSPATH" not in content
    assert "// ignored" not in content
    assert "style.css created successfully" in capsys.readouterr().out

def test_overwrites_existing_main_file(tmp_path):
    write_composer(tmp_path, EXAMPLE_COMPOSER)
    (tmp_path / "index.php").write_text("stale")
    assert run_action(tmp_path) == 0
    assert "stale" not in (tmp_path / "index.php").read_text()

def test_cli_flags_override_environment(tmp_path):
    write_composer(tmp_path, EXAMPLE_COMPOSER)
    argv = [
        "--working-directory", str(tmp_path),
        "--main-file", "plugin.php",
        "--prepend", "// from cli",
        "--repository", "other/repo",
    ]
    assert main(argv, environ={"MAIN_FILE": "index.php", "GITHUB_OUTPUT": str(tmp_path / "out")}) == 0

    content = (tmp_path / "plugin.php").read_text()
    assert "// from cli\n\ndefined( 'ABSPATH' )" in content
    assert " * GitHub URI: other/repo\n" in content
    assert not (tmp_path / "index.php").exists()

def test_fallback_screenshot_enabled(tmp_path, capsys):
    write_composer(tmp_path, EXAMPLE_COMPOSER)
    assert run_action(tmp_path, FALLBACK_SCREENSHOT="1") == 0
    assert (tmp_path / "screenshot.png").read_bytes() == PLACEHOLDER_PNG
    assert "Created screenshot.png" in capsys.readouterr().out

def test_fallback_screenshot_disabled(tmp_path):
    write_composer(tmp_path, EXAMPLE_COMPOSER)
    assert run_action(tmp_path, FALLBACK_SCREENSHOT="off") == 0
    assert not (tmp_path / "screenshot.png").exists()

def test_fallback_screenshot_keeps_existing(tmp_path):
    write_composer(tmp_path, EXAMPLE_COMPOSER)
    (tmp_path / "screenshot.jpg").write_bytes(b"jpg")
    assert run_action(tmp_path, FALLBACK_SCREENSHOT="true") == 0
    assert not (tmp_path / "screenshot.png").exists()

def test_missing_manifest_reports_failure(tmp_path, capsys):
    assert run_action(tmp_path) == 1
    assert "::error::composer.json not found" in capsys.readouterr().out
    assert not (tmp_path / "index.php").exists()

def test_malformed_manifest_reports_failure(tmp_path, capsys):
    (tmp_path / "composer.json").write_text('{"name": ')
    assert run_action(tmp_path) == 1
    assert "::error::Could not parse composer.json" in capsys.readouterr().out

def test_write_failure_reports_failure(tmp_path, capsys):
    write_composer(tmp_path, EXAMPLE_COMPOSER)
    assert run_action(tmp_path, MAIN_FILE="missing/dir/index.php") == 1
    assert "::error::[Errno 2]" in capsys.readouterr().out
    assert not (tmp_path / "output.txt").exists()

def test_main_file_name_with_markup_characters(tmp_path, capsys):
    write_composer(tmp_path, EXAMPLE_COMPOSER)
    assert run_action(tmp_path, MAIN_FILE="[bold]x.php") == 0
    assert (tmp_path / "[bold]x.php").exists()
    assert "[bold]x.php created successfully" in capsys.readouterr().out

def test_set_failed_escapes_message(capsys):
    set_failed("50%\r\nboom")
    assert "::error::50%25%0D%0Aboom" in capsys.readouterr().out

def test_project_name_without_manifest_name(tmp_path):
    write_composer(tmp_path, {"version": "1.0.0"})
    assert run_action(tmp_path) == 0
    assert (tmp_path / "output.txt").read_text() == "project-name=\n"

def test_set_output_multiline_and_legacy(tmp_path, capsys):
    output = tmp_path / "output.txt"
    set_output("notes", "line one\nline two", str(output))
    lines = output.read_text().splitlines()
    assert lines[0].startswith("notes<<ghadelimiter_")
    assert lines[1:3] == ["line one", "line two"]
    assert lines[3] == lines[0].split("<<", 1)[1]

    set_output("project-name", "plugin")
    assert "::set-output name=project-name::plugin" in capsys.readouterr().out
