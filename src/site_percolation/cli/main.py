"""
Command-line interface for site_percolation.

Commands:
    percolation replay input.txt
    percolation stats -n 200 -T 100 --seed 1
    percolation sweep --config config/threshold_sweep.yaml --output thresholds.csv
"""

import logging
from pathlib import Path

import click
import yaml


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


@click.group()
@click.version_option(package_name='site_percolation')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def cli(verbose):
    """Site percolation on N-by-N grids."""
    setup_logging(verbose)


@cli.command('replay')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
def replay_cmd(input_file):
    """Open the sites listed in INPUT_FILE and report whether the grid percolates."""
    from ..io.reader import replay

    try:
        perc = replay(input_file)
    except (FileNotFoundError, ValueError, IndexError) as e:
        raise click.ClickException(str(e))

    click.echo(f"{perc.number_of_open_sites()} open sites")
    if perc.percolates():
        click.echo("percolates")
    else:
        click.echo("does not percolate")


@cli.command('stats')
@click.option('--size', '-n', required=True, type=int, help='Grid side length')
@click.option('--trials', '-T', required=True, type=int, help='Number of trials')
@click.option('--seed', type=int, default=None, help='Random seed')
@click.option('--confidence', default=0.95, type=float, help='Confidence level')
def stats_cmd(size, trials, seed, confidence):
    """Estimate the percolation threshold by Monte-Carlo simulation."""
    from ..percolation.stats import PercolationStats

    try:
        ps = PercolationStats(size, trials, seed=seed, confidence=confidence)
    except ValueError as e:
        raise click.ClickException(str(e))

    pct = int(round(confidence * 100))
    click.echo(f"mean                    = {ps.mean():.6f}")
    click.echo(f"stddev                  = {ps.stddev():.6f}")
    click.echo(f"{pct}% confidence interval = "
               f"[{ps.confidence_lo():.6f}, {ps.confidence_hi():.6f}]")


@cli.command('sweep')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Experiment config YAML')
@click.option('--output', '-o', 'output_file', type=click.Path(),
              help='Output CSV (overrides output.csv in the config)')
def sweep_cmd(config_path, output_file):
    """Run threshold estimates for every grid size in a config."""
    from ..run.config import ExperimentConfig
    from ..percolation.stats import run_sweep

    try:
        config = ExperimentConfig.from_yaml(config_path)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(str(e))

    click.echo(f"Run: {config.run_name}")
    click.echo(f"  sizes={config.sizes}, trials={config.trials}, seed={config.seed}")

    df = run_sweep(config.sizes, config.trials, seed=config.seed,
                   confidence=config.confidence)
    click.echo(df.to_string(index=False))

    output = Path(output_file) if output_file else config.output_csv
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output, index=False)
        click.echo(f"✓ Saved {len(df)} rows to {output}")


if __name__ == '__main__':
    cli()
