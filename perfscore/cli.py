from __future__ import annotations

from pathlib import Path

import click
import structlog

logger = structlog.get_logger(__name__)


def _parse_pairs(pairs: tuple[str, ...], option: str) -> dict[str, float]:
    parsed: dict[str, float] = {}
    for pair in pairs:
        category, sep, value = pair.partition("=")
        if not sep or not category:
            raise click.BadParameter(f"expected CATEGORY=VALUE, got '{pair}'", param_hint=option)
        try:
            parsed[category] = float(value)
        except ValueError as exc:
            raise click.BadParameter(f"'{value}' is not a number", param_hint=option) from exc
    return parsed


@click.group()  # type: ignore[misc]
def cli() -> None:
    """PerfScore: weighted performance scoring for KPIs and reviews."""
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
    )


@cli.command()  # type: ignore[misc]
@click.option("--score", "scores", multiple=True, help="Category score as CATEGORY=VALUE")  # type: ignore[misc]
@click.option("--weight", "weights", multiple=True, help="Category weight as CATEGORY=VALUE")  # type: ignore[misc]
@click.option("--breakdown", is_flag=True, help="Print the per-category contributions")  # type: ignore[misc]
def score(scores: tuple[str, ...], weights: tuple[str, ...], breakdown: bool) -> None:
    """Compute the composite score of a set of category scores."""
    from perfscore.scoring.aggregator import compute_weighted_score, decompose

    score_set = _parse_pairs(scores, "--score")
    weight_set = _parse_pairs(weights, "--weight")

    click.echo(f"Composite score: {compute_weighted_score(score_set, weight_set)}")

    if breakdown:
        for category, parts in decompose(score_set, weight_set).items():
            click.echo(
                f"  {category}: raw={parts['raw']} weight={parts['weight']} "
                f"contribution={parts['contribution']}"
            )


@cli.command()  # type: ignore[misc]
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))  # type: ignore[misc]
@click.option(  # type: ignore[misc]
    "--weights",
    "weights_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file mapping category to weight",
)
@click.option("--id-column", default="employee_id", help="Column identifying each row")  # type: ignore[misc]
@click.option("--output", "output_path", default=None, help="Output file (.parquet or .csv)")  # type: ignore[misc]
def batch(input_path: Path, weights_path: Path, id_column: str, output_path: str | None) -> None:
    """Score every row of a CSV or parquet file of category scores."""
    from perfscore.config.settings import Settings
    from perfscore.scoring.batch import load_frame, load_weights, score_frame

    try:
        weights = load_weights(weights_path)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--weights") from exc

    frame = load_frame(input_path)
    try:
        result = score_frame(frame, weights, id_column=id_column)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_path is None:
        settings = Settings()
        settings.ensure_dirs()
        out = settings.output_dir / "composite_scores.parquet"
    else:
        out = Path(output_path)

    if out.suffix == ".csv":
        result.write_csv(out)
    else:
        result.write_parquet(out)

    logger.info("batch_output_written", path=str(out), rows=result.height)

    click.echo(f"Scored {result.height} rows")
    click.echo(f"Results saved to {out}")


@cli.command()  # type: ignore[misc]
@click.option("--host", default=None, help="Server host")  # type: ignore[misc]
@click.option("--port", default=None, type=int, help="Server port")  # type: ignore[misc]
@click.option("--reload", is_flag=True, help="Enable auto-reload")  # type: ignore[misc]
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the FastAPI server."""
    import uvicorn

    from perfscore.config.settings import ApiConfig

    api_config = ApiConfig()
    uvicorn.run(
        "perfscore.api.app:create_app",
        host=host or api_config.host,
        port=port or api_config.port,
        reload=reload,
        factory=True,
    )


if __name__ == "__main__":
    cli()
