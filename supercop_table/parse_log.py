"""
Parse supercop benchmark log lines.

One line of a supercop `data` file looks like

    20221122 kivsa amd64 20221207 crypto_scalarmult curve25519/timecop try \
        6f0e... ok 126390 31800 3400000000 crypto_scalarmult/curve25519/sandy2x \
        gcc_-march=native_-O3

The grammar below names each space-separated field. Only impl, host and cycles
travel downstream; cc/cflags are kept to break ties between equally fast
compiler variants.
"""

import re
from dataclasses import dataclass
from typing import Optional

# (field, pattern) in line order, separated by single spaces
LINE_FIELDS = [
    ("supercop_version", r"\d+"),
    ("host", r"\w+"),
    ("abi", r"\w+"),
    ("date", r"\d+"),
    ("primitive", r"\w+"),
    ("timecop", r"[\w/]+"),
    ("attempt", r"try(?:\(\w+placeasm:\w+\))?"),
    ("checksum", r"[\w/]+"),
    ("status", r"ok|unknown"),
    ("cycles", r"\d+"),
    ("checksum_cycles", r"\d+"),
    ("cycles_per_second", r"\d+"),
    ("impl", r"[-\w/]+"),
    ("compiler", r"(?P<cc>[/\w]+)_(?P<cflags>[-=\w/]+)"),
]

LINE_RE = re.compile(" ".join(f"(?P<{name}>{pattern})" for name, pattern in LINE_FIELDS))

SKIP_MARKER = "objsize"


@dataclass(frozen=True)
class Observation:
    """One benchmark run of one implementation on one host"""
    impl: str
    host: str
    cycles: int
    cc: str = ""
    cflags: str = ""


def parse_line(line: str) -> Optional[Observation]:
    """Parse one log line. Returns None for anything that is not a usable 'ok' record."""
    if SKIP_MARKER in line:
        return None

    m = LINE_RE.search(line)
    if not m or m.group('status') != 'ok':
        return None

    cycles = int(m.group('cycles'))
    # a zero count is not a measurement, and it would be every column's minimum
    if cycles == 0:
        return None

    return Observation(
        impl=m.group('impl'),
        host=m.group('host'),
        cycles=cycles,
        cc=m.group('cc'),
        cflags=m.group('cflags'),
    )


def parse_lines(lines):
    """Yield an Observation for every parseable line."""
    for line in lines:
        obs = parse_line(line)
        if obs is not None:
            yield obs
