"""
Collect benchmark results from per-host supercop logs.

Layout on disk:

    ROOT/<hostname>/data

Only hosts on the configured allow-list are read. For every
(implementation, host) pair the fastest run across all compiler/flag
variants is kept.
"""

import sys
from dataclasses import replace
from pathlib import Path
from types import MappingProxyType

from .parse_log import SKIP_MARKER, parse_line


class AggregateMatrix:
    """Read-only mapping: implementation -> {host -> best cycle count}."""

    def __init__(self, cycles):
        self._cycles = MappingProxyType({
            impl: MappingProxyType(dict(by_host))
            for impl, by_host in cycles.items()
        })

    def __getitem__(self, impl):
        return self._cycles[impl]

    def __contains__(self, impl):
        return impl in self._cycles

    def __iter__(self):
        return iter(self._cycles)

    def __len__(self):
        return len(self._cycles)

    def __eq__(self, other):
        if isinstance(other, AggregateMatrix):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    def __repr__(self):
        return f"AggregateMatrix({self.to_dict()!r})"

    def implementations(self):
        return sorted(self._cycles)

    def hosts_for(self, impl):
        return sorted(self._cycles.get(impl, {}))

    def get(self, impl, host, default=None):
        return self._cycles.get(impl, {}).get(host, default)

    def to_dict(self):
        return {impl: dict(by_host) for impl, by_host in self._cycles.items()}


def load_host(root, host):
    """Parse ROOT/<host>/data. Returns [] if the host has no data file."""
    datafile = Path(root) / host / "data"
    if not datafile.is_file():
        print(f"Warning: no data for host {host} ({datafile})", file=sys.stderr)
        return []

    with open(datafile, 'r', encoding='utf-8', errors='replace') as f:
        content = f.read()

    observations = []
    for line in content.split("\n"):
        if SKIP_MARKER in line:
            continue
        obs = parse_line(line)
        if obs is not None:
            # tag with the allow-listed directory, not whatever the line claims
            observations.append(replace(obs, host=host))

    print(f"Loaded {len(observations)} observations from {host}", file=sys.stderr)
    return observations


def load_observations(root, hosts):
    """Load observations for every allow-listed host, in the given order."""
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"results directory not found: {root}")

    observations = []
    for host in hosts:
        if not (root / host).is_dir():
            print(f"Warning: host directory missing: {root / host}", file=sys.stderr)
            continue
        observations.extend(load_host(root, host))
    return observations


def _rank(obs):
    # lowest cycles wins; equal cycles fall back to the compiler/flags name
    return (obs.cycles, obs.cc, obs.cflags)


def select_best(observations):
    """Group by (impl, host) and keep the fastest observation of each group."""
    best = {}
    for obs in observations:
        key = (obs.impl, obs.host)
        current = best.get(key)
        if current is None or _rank(obs) < _rank(current):
            best[key] = obs
    return best


def reduce_observations(observations):
    """Build the AggregateMatrix from raw observations."""
    cycles = {}
    for (impl, host), obs in select_best(observations).items():
        cycles.setdefault(impl, {})[host] = obs.cycles
    return AggregateMatrix(cycles)


def collect_results(root, config):
    """Load all allow-listed hosts under root and reduce to an AggregateMatrix."""
    return reduce_observations(load_observations(root, config.hostnames))
