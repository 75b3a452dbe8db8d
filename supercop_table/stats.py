"""Derived values: per-implementation geometric mean and per-section minimums."""

from dataclasses import dataclass

import numpy as np

from .errors import IncompleteDataError


@dataclass(frozen=True)
class SectionBest:
    """Smallest value per host column, and smallest geomean, within one section"""
    by_host: dict
    mean: float


def geomean(by_host, hosts, impl=None) -> float:
    """N-th root of the product of the per-host values over exactly `hosts`.

    Every host must have a value; a gap raises IncompleteDataError instead of
    being treated as 0 or 1.
    """
    hosts = list(hosts)
    missing = [h for h in hosts if h not in by_host]
    if missing or not hosts:
        raise IncompleteDataError(missing, impl=impl)

    # float64 product, cycle counts across 8 hosts overflow int64
    values = np.array([by_host[h] for h in hosts], dtype=np.float64)
    return float(np.prod(values) ** (1.0 / len(values)))


def present_implementations(section, matrix):
    """Section implementations that have at least one recorded value, in section order."""
    return [impl for impl in section.implementations if impl in matrix]


def column_minimum(matrix, impls, host):
    """Smallest recorded value for `host` among `impls`, or None if none recorded."""
    values = [matrix[impl][host] for impl in impls if host in matrix[impl]]
    if not values:
        return None
    return int(np.min(values))


def section_best(matrix, impls, hosts) -> SectionBest:
    """Per-host minimums and the minimum geomean for one section's implementations."""
    hosts = list(hosts)
    by_host = {host: column_minimum(matrix, impls, host) for host in hosts}
    means = [geomean(matrix[impl], hosts, impl=impl) for impl in impls]
    return SectionBest(by_host=by_host, mean=min(means) if means else None)
