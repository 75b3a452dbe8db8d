"""Fatal report errors. Anything absorbed (bad lines, absent hosts) never raises."""


class ReportError(Exception):
    """Base class for errors that abort the report"""


class ConfigError(ReportError):
    """Configuration file missing or malformed"""


class UnknownImplementationError(ReportError):
    """A section references an implementation with no display metadata"""

    def __init__(self, impl):
        super().__init__(f"{impl} not in implementation metadata")
        self.impl = impl


class IncompleteDataError(ReportError):
    """Geometric mean requested without a value for every host"""

    def __init__(self, missing, impl=None):
        self.missing = list(missing)
        self.impl = impl
        what = f" for {impl}" if impl else ""
        if self.missing:
            detail = f"no value for host(s) {', '.join(self.missing)}"
        else:
            detail = "no hosts to average over"
        super().__init__(f"incomplete data{what}: {detail}")
