"""
Render the LaTeX comparison table.

Generates one sidewaystable: a header row of machines, one block per
section (rotated heading + one row per implementation), and a footer with
the explanatory note. Every cell shows the scaled cycle count and its ratio
to the best value in the same section and column; the best is set in bold.
"""

from decimal import ROUND_HALF_UP, Decimal

from .errors import UnknownImplementationError
from .stats import geomean, present_implementations, section_best


def to_fixed(value, digits: int) -> str:
    """Round half-up on the exact binary value, like Number.toFixed."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_cycles(value, smallest, factor=1000, pad=18) -> str:
    """One table cell: scaled value plus ratio to the column minimum."""
    ratio = f"{{\\tiny ({to_fixed(value / smallest, 2)}x)}}"
    if factor == 1000:
        cycles = f"{to_fixed(value / factor, 0)}k"
    else:
        cycles = to_fixed(value, 0)

    if value == smallest:
        cell = f"\\textbf{{{cycles} {ratio}}}"
    else:
        cell = f"{cycles} {ratio}"
    return cell.rjust(pad)


def field_label(impl, config) -> str:
    """Short language label: impl -> field tag -> label. Unknown impls get a leading dash."""
    info = config.implementations.get(impl)
    if info is None:
        return f"-{impl}"
    return config.languages.get(info.field, info.field)


def check_metadata(config):
    """Every configured implementation must have display metadata."""
    for section in config.sections:
        for impl in section.implementations:
            if impl not in config.implementations:
                raise UnknownImplementationError(impl)


def table_start(config) -> str:
    return "\n".join([
        "\\begin{sidewaystable}[h]",
        "\\vspace{20em}",
        "\\centering",
        "",
        f"\\caption{{{config.caption}}}",
        f"\\label{{f:{config.label}}}",
        "\\tiny",
    ])


def table_head(config) -> str:
    header = [
        "",  # heading column
        "Implementation".ljust(config.pad_name),
        "Lang.".rjust(config.pad_field),
        *[h.label.rjust(config.pad_cycles) for h in config.hosts],
        "G.M.".rjust(config.pad_cycles),
    ]
    return "\n".join([
        f"\\begin{{tabular}}{{cll{'r' * len(config.hosts)}r}}",
        "\\toprule",
        " & ".join(header) + "\\\\",
        "",
    ])


def render_row(impl, by_host, mean, best, config) -> str:
    cells = [
        "",
        config.implementations[impl].name.ljust(config.pad_name),
        field_label(impl, config).rjust(config.pad_field),
    ]
    for host in config.hostnames:
        cells.append(format_cycles(by_host[host], best.by_host[host],
                                   config.factor, config.pad_cycles))
    cells.append(format_cycles(mean, best.mean, config.factor, config.pad_cycles))
    return " & ".join(cells) + " \\\\"


def render_section(section, matrix, config):
    """Block for one section, or None if none of its implementations have data."""
    impls = present_implementations(section, matrix)
    if not impls:
        return None

    hosts = config.hostnames
    best = section_best(matrix, impls, hosts)

    lines = [
        "\\midrule",
        f"\\multirow{{{len(impls)}}}{{*}}{{\\rotatebox[origin=c]{{90}}{{\\centering {section.heading}}}}}",
    ]
    for impl in impls:
        mean = geomean(matrix[impl], hosts, impl=impl)
        lines.append(render_row(impl, matrix[impl], mean, best, config))
    return "\n".join(lines)


def table_end(config) -> str:
    return "\n".join(config.note) + "\n\\end{sidewaystable}\n"


def render_document(matrix, config) -> str:
    """Full table text for the given matrix. Raises before producing any output on bad config."""
    check_metadata(config)

    blocks = [render_section(s, matrix, config) for s in config.sections]
    meat = "\n\n".join(b for b in blocks if b is not None)
    bottom = "\n".join(["", "\\bottomrule", "\\end{tabular}", "\\vspace{2mm} "])

    return "\n".join([
        table_start(config),
        table_head(config) + meat + bottom,
        table_end(config),
    ]) + "\n"
