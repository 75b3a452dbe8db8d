"""Best-case cycle tables from supercop benchmark logs."""

from .collect import AggregateMatrix, collect_results, reduce_observations
from .config import ReportConfig, get_default_config, load_config
from .errors import (ConfigError, IncompleteDataError, ReportError,
                     UnknownImplementationError)
from .parse_log import Observation, parse_line
from .render_table import render_document
from .stats import geomean, section_best

__version__ = "1.0.0"
