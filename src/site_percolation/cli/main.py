"""
Command-line interface for site_percolation.

Commands:
    percolation smoke                      - Reference 3x3 smoke test
    percolation smoke --n 5                - Open column 1 of a 5x5 grid
    percolation run --config scenario.yaml - Open the sites listed in a YAML scenario
    percolation check --n 2 --site 1 1 --site 2 1
"""

import sys
import click

from ..percolation import PercolationGrid, PercolationError


@click.group()
@click.version_option()
def cli():
    """Site Percolation - connectivity queries on an n-by-n grid."""
    pass


def _report(grid: PercolationGrid, name: str) -> None:
    """Print every full site, then the open count and percolation status."""
    click.echo(f"Scenario: {name} (n={grid.n})")

    for row in range(1, grid.n + 1):
        for col in range(1, grid.n + 1):
            if grid.is_full(row, col):
                click.echo(f"[{row},{col}]: open={grid.is_open(row, col)}, "
                           f"full={grid.is_full(row, col)}")

    click.echo(f"Open sites: {grid.number_of_open_sites()}/{grid.n * grid.n} "
               f"({grid.open_fraction():.3f})")
    click.echo(f"Percolates: {grid.percolates()}")


@cli.command('smoke')
@click.option('--n', '-n', 'n', type=int, default=None,
              help='Grid size; opens column 1 top to bottom instead of the 3x3 reference')
def smoke(n):
    """Run the manual smoke test and print the full sites."""
    from ..run.scenario import reference_scenario

    try:
        if n is None:
            config = reference_scenario()
            grid = config.build()
            name = config.name
        else:
            grid = PercolationGrid(n)
            grid.open_many((row, 1) for row in range(1, n + 1))
            name = "column-1"
    except PercolationError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    _report(grid, name)


@cli.command('run')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Scenario YAML file')
def run(config_path):
    """Open the sites listed in a scenario file and report connectivity."""
    from ..run.scenario import ScenarioConfig

    try:
        config = ScenarioConfig.from_yaml(config_path)
    except ValueError as e:
        click.echo(f"ERROR: Invalid scenario {config_path}: {e}", err=True)
        sys.exit(1)

    click.echo(f"Loaded {len(config.sites)} sites from {config_path}")
    if config.description:
        click.echo(f"  {config.description}")

    try:
        grid = config.build()
    except PercolationError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    _report(grid, config.name)


@cli.command('check')
@click.option('--n', '-n', 'n', required=True, type=int, help='Grid size')
@click.option('--site', '-s', 'sites', multiple=True, type=(int, int),
              help='Site to open as ROW COL (repeatable)')
def check(n, sites):
    """Open the given sites and print a one-line summary."""
    try:
        grid = PercolationGrid(n)
        grid.open_many(sites)
    except PercolationError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    click.echo(f"n={grid.n} open={grid.number_of_open_sites()} "
               f"percolates={grid.percolates()}")


if __name__ == '__main__':
    cli()
