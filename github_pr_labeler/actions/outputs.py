"""Reports output values back to the invoking GitHub Actions workflow."""

import uuid
from pathlib import Path
from typing import Sequence

import structlog
import typer

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

OutputValue = str | bool | Sequence[str]


def format_output_value(value: OutputValue) -> str:
    """Render an output value the way workflow expressions expect it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return ",".join(value)


class ActionOutputs:
    """Collects step outputs and appends them to the workflow's outputs file.

    Without an outputs file, values are echoed as ``name=value`` lines instead.
    """

    def __init__(self, output_path: Path | None = None) -> None:
        """Initialize the outputs, optionally backed by the GITHUB_OUTPUT file."""
        self.output_path = output_path
        self.values: dict[str, str] = {}

    def set_output(self, name: str, value: OutputValue) -> None:
        """Record an output and write it out immediately."""
        rendered = format_output_value(value)
        self.values[name] = rendered
        logger.info("Action output", name=name, value=rendered)
        if self.output_path is None:
            typer.echo(f"{name}={rendered}")
            return
        with open(self.output_path, "a", encoding="utf-8") as f:
            if "\n" in rendered:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                f.write(f"{name}<<{delimiter}\n{rendered}\n{delimiter}\n")
            else:
                f.write(f"{name}={rendered}\n")
