"""
Pytest configuration and shared fixtures
"""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from supercop_table.config import IMPLEMENTATIONS, LANGUAGES, build_config  # noqa: E402

SANDY2X = "crypto_scalarmult/curve25519/sandy2x"
DONNA = "crypto_scalarmult/curve25519/donna"
AMD64_51 = "crypto_scalarmult/curve25519/amd64-51"
LIBSECP = "crypto_scalarmult/secp256k1/libsecp256k1-ots"


def make_line(host, impl, cycles, cc="gcc", cflags="-march=native_-O3",
              status="ok", attempt="try"):
    """Build one supercop data line in the format the harness writes."""
    return (f"20221122 {host} amd64 20221207 crypto_scalarmult curve25519/timecop "
            f"{attempt} 6f0e1a2bc3 {status} {cycles} 31800 3400000000 {impl} {cc}_{cflags}")


def write_host(root, host, lines):
    """Write ROOT/<host>/data with the given lines."""
    host_dir = root / host
    host_dir.mkdir(parents=True, exist_ok=True)
    (host_dir / "data").write_text("\n".join(lines) + "\n", encoding="utf-8")
    return host_dir / "data"


@pytest.fixture
def two_host_config():
    """kivsa + nakhash, one Curve25519 section with three implementations."""
    return build_config(
        [("kivsa", "1900X"), ("nakhash", "5800X")],
        [[SANDY2X, DONNA, AMD64_51]],
        IMPLEMENTATIONS,
        LANGUAGES,
        factor=1,
    )


@pytest.fixture
def two_section_config():
    """kivsa + nakhash, Curve25519 and secp256k1 sections."""
    return build_config(
        [("kivsa", "1900X"), ("nakhash", "5800X")],
        [[SANDY2X, DONNA], [LIBSECP]],
        IMPLEMENTATIONS,
        LANGUAGES,
    )


@pytest.fixture
def results_dir(tmp_path):
    """
    On-disk results tree for the end-to-end scenario:
    kivsa has two competing sandy2x runs (5000, 5200), nakhash one (2000).
    Also contains noise lines and a host that is not on the allow-list.
    """
    write_host(tmp_path, "kivsa", [
        make_line("kivsa", SANDY2X, 5200, cflags="-O2"),
        make_line("kivsa", SANDY2X, 5000, cflags="-O3"),
        "20221122 kivsa amd64 20221207 crypto_scalarmult curve25519/timecop objsize 1234 0 0",
        "garbage line",
        "",
    ])
    write_host(tmp_path, "nakhash", [
        make_line("nakhash", SANDY2X, 2000),
    ])
    write_host(tmp_path, "intruder", [
        make_line("intruder", SANDY2X, 1),
    ])
    return tmp_path
