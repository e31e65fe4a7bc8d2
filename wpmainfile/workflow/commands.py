import uuid
from typing import Optional
from rich.console import Console

console = Console()

def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")

def issue_command(command: str, message: str = "", name: Optional[str] = None) -> None:
    """
    Prints a GitHub Actions workflow command, e.g. '::error::message'.
    """
    props = f" name={name}" if name else ""
    # Raw output: rich markup would mangle '[...]' in messages
    console.print(f"::{command}{props}::{escape_data(message)}", markup=False, highlight=False, soft_wrap=True)

def _make_delimiter(value: str) -> str:
    delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    while delimiter in value:
        delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    return delimiter

def set_output(name: str, value: str, output_file: Optional[str] = None) -> None:
    """
    Sets a step output. Appends to the $GITHUB_OUTPUT file when one is given,
    otherwise falls back to the legacy '::set-output' command.
    """
    if not output_file:
        issue_command("set-output", value, name=name)
        return

    with open(output_file, "a", encoding="utf-8") as out:
        if "\n" in value:
            delimiter = _make_delimiter(value)
            out.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            out.write(f"{name}={value}\n")

def set_failed(message: str) -> None:
    issue_command("error", message)
