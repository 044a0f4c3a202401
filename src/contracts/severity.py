from enum import IntEnum


class Severity(IntEnum):
    """
    Monitoring-plugin severity. The integer value is the process exit code,
    and the ordering defines which of two severities is worse.
    """

    OK = 0
    WARNING = 1
    CRITICAL = 2

    @property
    def prefix(self) -> str:
        """
        Return the status-line prefix for this severity.
        """
        if self is Severity.CRITICAL:
            return "CRITICAL - "
        if self is Severity.WARNING:
            return "WARNING  - "
        return ""
