from __future__ import annotations

from pathlib import Path

import typer

from asserting.reporting.console import StyleMode

app = typer.Typer(name="asserting", help="Render saved assertion results")


@app.command()
def report(
    results: str = typer.Argument(help="Path to a YAML results file"),
    style: StyleMode | None = typer.Option(
        None, "--style", "-s", help="Output styling (default: auto)"
    ),
    junit: str | None = typer.Option(None, help="Also write a JUnit XML report here"),
    config: str | None = typer.Option(None, help="Path to a report config YAML"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(None, help="Write debug output to this file"),
):
    """Render every suite in a results file."""
    from yaml import YAMLError

    from asserting.config import ReportConfig, load_config
    from asserting.reporting.console import ColoredStyler, get_styler
    from asserting.reporting.junit import write_junit
    from asserting.results import load_results
    from asserting.verbose import setup_logger

    report_config = ReportConfig()
    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        # pydantic ValidationError and UnicodeDecodeError are ValueErrors
        try:
            report_config = load_config(config_path)
        except (ValueError, YAMLError, OSError) as e:
            typer.echo(f"Error: invalid config {config}: {e}", err=True)
            raise typer.Exit(1)

    logger = setup_logger(
        Path(debug_log) if debug_log else None,
        verbose=verbose or report_config.verbose,
        logger_name="asserting_cli",
    )

    results_path = Path(results)
    if not results_path.exists():
        typer.echo(f"Error: results file not found: {results}", err=True)
        raise typer.Exit(1)

    try:
        suites = load_results(results_path, logger=logger)
    except (ValueError, YAMLError, OSError) as e:
        typer.echo(f"Error: invalid results file {results}: {e}", err=True)
        raise typer.Exit(1)
    logger.debug(f"Rendering {len(suites)} suites from {results_path}")

    styler = get_styler(style or report_config.style)
    for i, suite in enumerate(suites):
        if i:
            typer.echo("")
        typer.echo(
            suite.render(styler),
            nl=False,
            color=isinstance(styler, ColoredStyler),
        )

    junit_target = junit or report_config.junit
    if junit_target:
        junit_path = write_junit(Path(junit_target), suites, logger=logger)
        logger.debug(f"JUnit report written to {junit_path}")
        typer.echo(f"JUnit report: {junit_path}")


@app.command()
def schema(
    out: str = typer.Option(
        "asserting.schema.json", "--out", help="Output path for the JSON Schema"
    ),
):
    """Write the JSON Schema for results files."""
    from asserting.schema import write_json_schema

    out_path = write_json_schema(Path(out))
    typer.echo(f"Wrote schema: {out_path}")
