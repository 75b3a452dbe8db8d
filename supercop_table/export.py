"""Dump the aggregate matrix and per-implementation geomeans as JSON."""

import json
from pathlib import Path

from .errors import IncompleteDataError
from .stats import geomean


def results_json(matrix, config) -> dict:
    hosts = config.hostnames
    geomeans = {}
    for impl in matrix.implementations():
        try:
            geomeans[impl] = round(geomean(matrix[impl], hosts, impl=impl), 2)
        except IncompleteDataError:
            geomeans[impl] = None

    return {
        "hosts": hosts,
        "results": matrix.to_dict(),
        "geomeans": geomeans,
    }


def write_results_json(matrix, config, output_path):
    """Write results JSON to output_path, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(results_json(matrix, config), f, indent=2, sort_keys=True)
        f.write("\n")
    return output_path
