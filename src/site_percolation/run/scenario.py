"""
Scenario configuration.

A ScenarioConfig loads a YAML file naming a grid size and the ordered list of
sites to open, and builds the resulting PercolationGrid.

Example file:

    name: reference
    description: Manual smoke test
    n: 3
    sites:
      - [1, 1]
      - [2, 1]
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..percolation import PercolationGrid


REFERENCE_SITES = [(1, 1), (2, 1), (1, 3), (2, 3), (3, 2)]


class ScenarioConfig:
    """
    Loads and validates a scenario definition.

    Example:
        config = ScenarioConfig.from_yaml('scenarios/reference.yaml')
        grid = config.build()
        print(grid.percolates())
    """

    def __init__(self, data: Dict[str, Any], source: Optional[Path] = None):
        self._data = data
        self._source = source
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'ScenarioConfig':
        """Load scenario from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Scenario config not found: {path}")

        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in scenario config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Scenario config must be a mapping: {path}")

        return cls(data, source=path)

    def _validate(self):
        """Validate required keys and site entries."""
        for key in ['n', 'sites']:
            if key not in self._data:
                raise ValueError(f"Missing required scenario key: '{key}'")

        n = self._data['n']
        if not isinstance(n, int) or isinstance(n, bool):
            raise ValueError(f"Scenario 'n' must be an integer, got {n!r}")

        if not isinstance(self._data['sites'], list):
            raise ValueError("Scenario 'sites' must be a list of [row, col] pairs")

        for site in self._data['sites']:
            if (not isinstance(site, (list, tuple)) or len(site) != 2
                    or not all(isinstance(v, int) and not isinstance(v, bool) for v in site)):
                raise ValueError(f"Malformed site entry: {site!r}, expected [row, col]")

    # --- Properties ---

    @property
    def name(self) -> str:
        if 'name' in self._data:
            return self._data['name']
        if self._source is not None:
            return self._source.stem
        return 'scenario'

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    @property
    def n(self) -> int:
        return self._data['n']

    @property
    def sites(self) -> List[Tuple[int, int]]:
        return [(row, col) for row, col in self._data['sites']]

    def build(self) -> PercolationGrid:
        """
        Construct the grid and open every site in order.

        Raises:
            InvalidArgument: if n is not positive
            OutOfBounds: if a site lies outside the grid
        """
        grid = PercolationGrid(self.n)
        grid.open_many(self.sites)
        return grid


def reference_scenario() -> ScenarioConfig:
    """
    The built-in 3x3 smoke scenario.

    Sites (1,1),(2,1) and (1,3),(2,3) form two separate full columns; (3,2)
    is open but isolated, so the grid does not percolate.
    """
    return ScenarioConfig({
        'name': 'reference',
        'description': 'Manual smoke test on a 3x3 grid',
        'n': 3,
        'sites': [list(site) for site in REFERENCE_SITES],
    })
