from __future__ import annotations

import json
import logging
import os
import sys
import uuid
from pathlib import Path

import click

from .calculator import EstimateCalculator
from .errors import EstimationError
from .logging_config import set_run_id, setup_logging
from .project_repository import LocalProjectRepository
from .report import estimates_to_dict, render_report

# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "prod")
DEFAULT_INPUT_FILE = os.getenv("ESTIMATE_INPUT_FILE", "input.json")

logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "input_file",
    default=DEFAULT_INPUT_FILE,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--json", "as_json", is_flag=True, help="Print the estimates as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Log at DEBUG level.")
def main(input_file: Path, as_json: bool, verbose: bool) -> None:
    """Estimate deadlines and fees for the project described in INPUT_FILE."""
    setup_logging(environment=ENVIRONMENT, verbose=verbose)
    set_run_id(uuid.uuid4().hex[:12])

    repository = LocalProjectRepository()
    try:
        request = repository.get(input_file)
        estimates = EstimateCalculator().estimate(request)
    except (OSError, ValueError, EstimationError) as exc:
        logger.error(
            "Estimation failed",
            exc_info=True,
            extra={"input_file": str(input_file), "error": str(exc)},
        )
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(estimates_to_dict(estimates), indent=2))
    else:
        click.echo(render_report(request.start_date, estimates))


if __name__ == "__main__":
    main()
