"""
Static report configuration.

Hosts, sections, implementation metadata and language labels are fixed data,
not derived from the logs. They are bundled into one immutable ReportConfig
that gets passed to the loader, reducer and renderer.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from .errors import ConfigError


@dataclass(frozen=True)
class Host:
    """Benchmark machine: short hostname and table label"""
    hostname: str
    label: str


@dataclass(frozen=True)
class ImplInfo:
    """Display metadata for one implementation"""
    name: str
    field: str


@dataclass(frozen=True)
class Section:
    """One group of implementations rendered under a single heading"""
    key: str
    heading: str
    implementations: tuple


@dataclass(frozen=True)
class ReportConfig:
    """Everything the renderer needs besides the data itself"""
    hosts: tuple
    sections: tuple
    implementations: MappingProxyType
    languages: MappingProxyType
    caption: str
    label: str
    note: tuple
    factor: int = 1000
    pad_cycles: int = 18
    pad_name: int = 35
    pad_field: int = 8
    headings: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))

    @property
    def hostnames(self) -> list[str]:
        return [h.hostname for h in self.hosts]


# Machines whose results are trusted, in column order
HOSTS = [
    ("kivsa", "1900X"),
    ("nakhash", "5800X"),
    ("aljamus", "5950X"),
    ("nuc", "i7 6G"),
    ("akrav", "i7 10G"),
    ("akavish", "i9 10G"),
    ("pil", "i7 11G"),
    ("arnevet", "i9 12G"),
]

HEADINGS = {
    "curve25519": "Curve25519",
    "p256": "P-256",
    "p384": "P-384",
    "secp256k1": "secp256k1",
}

SECTIONS = [
    [
        "crypto_scalarmult/curve25519/sandy2x",
        "crypto_scalarmult/curve25519/amd64-64",
        "crypto_scalarmult/curve25519/amd64-51",
        "crypto_scalarmult/curve25519/donna",
        "crypto_scalarmult/curve25519/donna_c64",
        "crypto_scalarmult/curve25519/openssl-c-ots",
        "crypto_scalarmult/curve25519/openssl-ots",
        "crypto_scalarmult/curve25519/openssl-fe64-ots",
        "crypto_scalarmult/curve25519/openssl-fe51-cryptopt",
        "crypto_scalarmult/curve25519/openssl-fe64-cryptopt",
        "crypto_scalarmult/curve25519/openssl-fe64-fiat",
        "crypto_scalarmult/curve25519/everest-hacl-51",
        "crypto_scalarmult/curve25519/everest-hacl-64",
        "crypto_scalarmult/curve25519/everest-hacl-lib-51",
        "crypto_scalarmult/curve25519/everest-hacl-lib-64",
        "crypto_scalarmult/curve25519/openssl-fe64-w-armdazh",
    ],
    [
        "crypto_scalarmult/secp256k1/libsecp256k1-ots",
        "crypto_scalarmult/secp256k1/libsecp256k1-c-ots",
        "crypto_scalarmult/secp256k1/libsecp256k1-ots-c-dettman",
        "crypto_scalarmult/secp256k1/libsecp256k1-ots-cryptopt-dettman",
        "crypto_scalarmult/secp256k1/libsecp256k1-ots-cryptopt-bcc",
    ],
]

IMPLEMENTATIONS = {
    # Curve25519
    "crypto_scalarmult/curve25519/sandy2x": ("sandy2x~\\cite{sandy2x}", "av"),
    "crypto_scalarmult/curve25519/amd64-51": ("amd64-51~\\cite{Chen14}", "a64"),
    "crypto_scalarmult/curve25519/amd64-64": ("amd64-64~\\cite{Chen14}", "a64"),
    "crypto_scalarmult/curve25519/donna": ("donna~\\cite{curve25519-donna}", "av"),
    "crypto_scalarmult/curve25519/donna_c64": ("donna-c64~\\cite{curve25519-donna}", "c51"),
    "crypto_scalarmult/curve25519/openssl-c-ots": ("(1) OSSL ots~\\cite{openssl}", "c51"),
    "crypto_scalarmult/curve25519/openssl-ots": ("(2) OSSL fe-51 ots~\\cite{openssl}", "a51"),
    "crypto_scalarmult/curve25519/openssl-fe64-ots": ("(3) OSSL fe-64 ots~\\cite{openssl}", "a64"),
    "crypto_scalarmult/curve25519/openssl-fe51-cryptopt": ("(4) OSSL fe-51+\\textbf\\cryptopt", "a51"),
    "crypto_scalarmult/curve25519/openssl-fe64-cryptopt": ("(5) OSSL fe-64+\\textbf\\cryptopt (mul only)", "a64"),
    "crypto_scalarmult/curve25519/openssl-fe64-fiat": ("(6) OSSL fe-64+Fiat-C", "c64"),
    "crypto_scalarmult/curve25519/openssl-fe64-cryptopt-eql": ("OSSL 64+\\textbf\\cryptopt(mul as sq)", "a64"),
    "crypto_scalarmult/curve25519/openssl-fe64-fiat-eql": ("OSSL 64+Fiat-C (mul as sq)", "c64"),
    "crypto_scalarmult/curve25519/everest-hacl-51": ("(7) HACL*~fe-51~\\cite{hacl}", "c51"),
    "crypto_scalarmult/curve25519/everest-hacl-64": ("(8) HACL*~fe-64~\\cite{hacl}", "a64"),
    "crypto_scalarmult/curve25519/everest-hacl-lib-51": ("(9) HACL*~fe-51~\\cite{hacl}", "bin"),
    "crypto_scalarmult/curve25519/everest-hacl-lib-64": ("(10) HACL*~fe-64~\\cite{hacl}", "bin"),
    "crypto_scalarmult/curve25519/openssl-fe64-w-armdazh": ("(11) OSSL fe-64 + (RFC7748~\\cite{oliveira_sac2017})", "a64"),
    # secp256k1
    "crypto_scalarmult/secp256k1/openssl-ots": ("OSSL ots", "c port"),
    "crypto_scalarmult/secp256k1/openssl-cryptopt": ("OSSL+\\textbf\\cryptopt", "sa"),
    "crypto_scalarmult/secp256k1/libsecp256k1-ots": ("libsecp256k1~\\cite{libsecp256k1}", "sa"),
    "crypto_scalarmult/secp256k1/libsecp256k1-c-ots": ("libsecp256k1~\\cite{libsecp256k1}", "c52"),
    "crypto_scalarmult/secp256k1/libsecp256k1-ots-c-dettman": ("libsecp256k1+Dettman (mul only)", "c52"),
    "crypto_scalarmult/secp256k1/libsecp256k1-ots-cryptopt-dettman": ("libsecp256k1+\\textbf\\cryptopt (Dettman) (mul only)", "sa"),
    "crypto_scalarmult/secp256k1/libsecp256k1-ots-cryptopt-bcc": ("libsecp256k1+\\textbf\\cryptopt (CS2)", "sa"),
}

LANGUAGES = {
    "c port": "C",
    "c": "C",
    "c64": "C",
    "c52": "C",
    "c51": "C",
    "av": "asm-v",
    "a64": "asm",
    "a51": "asm",
    "sa": "asm",
}

CAPTION = ("Cost of scalar multiplication (in cycles) of different "
           "implementations benchmarking on different machines.")
LABEL = "fulltable2"

NOTE = [
    "",
    "Note:",
    "G.M. stands for geometric mean;",
    "ots stands for off-the-shelf;",
    "asm means assembly;",
    "-v indicates the use of vector instructions;",
    "bin means precompiled.",
    "",
    "\\cite{hacl} uses parallelized field arithmetic; ",
    "All libsecp256k1 implementations are unsaturated",
]


def section_key(implementations) -> str:
    """Curve folder of the first implementation, e.g. 'curve25519'."""
    parts = implementations[0].split("/")
    return parts[1] if len(parts) > 1 else parts[0]


def build_config(hosts, sections, implementations, languages,
                 headings=None, caption=CAPTION, label=LABEL, note=NOTE,
                 factor=1000) -> ReportConfig:
    """Assemble a ReportConfig from plain lists and dicts."""
    headings = dict(HEADINGS if headings is None else headings)

    if factor not in (1, 1000):
        raise ConfigError(f"factor must be 1 or 1000, got {factor!r}")

    built_sections = []
    for impls in sections:
        if not impls:
            raise ConfigError("empty section in configuration")
        key = section_key(impls)
        if key not in headings:
            raise ConfigError(f"no heading configured for section '{key}'")
        built_sections.append(Section(key=key, heading=headings[key],
                                      implementations=tuple(impls)))

    return ReportConfig(
        hosts=tuple(Host(hostname=h, label=l) for h, l in hosts),
        sections=tuple(built_sections),
        implementations=MappingProxyType({
            impl: ImplInfo(name=name, field=fld)
            for impl, (name, fld) in implementations.items()}),
        languages=MappingProxyType(dict(languages)),
        caption=caption,
        label=label,
        note=tuple(note),
        factor=factor,
        headings=MappingProxyType(headings),
    )


def get_default_config(factor: int = 1000) -> ReportConfig:
    """Default report configuration"""
    return build_config(HOSTS, SECTIONS, IMPLEMENTATIONS, LANGUAGES,
                        factor=factor)


def load_config(path, factor: Optional[int] = None) -> ReportConfig:
    """Load a report configuration from JSON.

    Expected keys: hosts ([[hostname, label], ...]), sections ([[impl, ...],
    ...]), implementations ({impl: {"name": .., "field": ..}}), languages
    ({field: label}). Optional: headings, caption, label, note, factor.
    """
    json_path = Path(path)
    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigError(f"config file not found: {json_path}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in {json_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"{json_path}: expected a JSON object, got {type(data).__name__}")

    missing = [k for k in ("hosts", "sections", "implementations", "languages")
               if k not in data]
    if missing:
        raise ConfigError(f"{json_path}: missing keys {', '.join(missing)}")

    try:
        impls = {impl: (info["name"], info["field"])
                 for impl, info in data["implementations"].items()}
        hosts = [(h, l) for h, l in data["hosts"]]
        return build_config(
            hosts,
            data["sections"],
            impls,
            data["languages"],
            headings=data.get("headings"),
            caption=data.get("caption", CAPTION),
            label=data.get("label", LABEL),
            note=data.get("note", NOTE),
            factor=factor if factor is not None else data.get("factor", 1000),
        )
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"{json_path}: malformed entry ({e})")
