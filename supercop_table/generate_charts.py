"""Generate per-section bar charts of best cycle counts (kcycles, lower is better)."""

import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from .stats import present_implementations


def generate_section_chart(matrix, config, section, charts_dir):
    """Grouped bars: one group per host, one bar per implementation. Returns the PNG path or None."""
    impls = present_implementations(section, matrix)
    if not impls:
        return None

    hosts = config.hosts
    x = np.arange(len(hosts))
    width = 0.8 / len(impls)

    fig, ax = plt.subplots(figsize=(max(10, len(hosts) * 1.5), 6))
    for i, impl in enumerate(impls):
        kcycles = [matrix.get(impl, h.hostname, 0) / 1000 for h in hosts]
        offset = (i - (len(impls) - 1) / 2) * width
        ax.bar(x + offset, kcycles, width, label=impl.split("/")[-1])

    ax.set_xlabel('Machine')
    ax.set_ylabel('Cycles (k)')
    ax.set_title(f'{section.heading}: Scalar Multiplication Cost\n(Lower is Better)')
    ax.set_xticks(x)
    ax.set_xticklabels([h.label for h in hosts])
    ax.legend(fontsize=7, ncol=2)

    plt.tight_layout()
    output = Path(charts_dir) / f"{section.key}_cycles.png"
    plt.savefig(output, dpi=150)
    plt.close(fig)
    print(f"Generated: {output.name}", file=sys.stderr)
    return output


def generate_charts(matrix, config, charts_dir):
    charts_dir = Path(charts_dir)
    charts_dir.mkdir(parents=True, exist_ok=True)
    generated = []
    for section in config.sections:
        path = generate_section_chart(matrix, config, section, charts_dir)
        if path is not None:
            generated.append(path)
    return generated
