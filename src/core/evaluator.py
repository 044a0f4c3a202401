import logging
import re

from contracts.probe_request import ProbeRequest
from contracts.probe_result import ProbeResult
from contracts.query_kind import QueryKind
from contracts.severity import Severity
from core.errors import ProbeError, ValueParseError, ZeroLivenessError
from core.query_client import QueryClient

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str) -> int:
    """
    Parse a sample value as an optional sign followed by ASCII digits.
    """
    if not _INTEGER.fullmatch(value):
        raise ValueParseError(f"invalid integer value {value!r}")
    return int(value)


def parse_float(value: str) -> float:
    """
    Parse a sample value as a float, rejecting whitespace and underscores.
    """
    if value != value.strip() or "_" in value:
        raise ValueParseError(f"invalid float value {value!r}")
    try:
        return float(value)
    except ValueError as e:
        raise ValueParseError(str(e)) from e


def evaluate_duration(duration: float, warning: float, critical: float) -> Severity:
    if duration > critical:
        return Severity.CRITICAL
    if duration > warning:
        return Severity.WARNING
    return Severity.OK


def format_status(
    severity: Severity, duration: float, warning: float, critical: float, samples: str
) -> str:
    return (
        f"{severity.prefix}scraping took {duration:.1f}s"
        f"|duration={duration:.6f}s;{warning:.0f};{critical:.0f};0;"
        f" samples={samples}"
    )


class Evaluator:
    """
    Runs the liveness, scrape duration and sample count checks in order and
    composes the final status line. The first failing check ends the run.
    """

    def __init__(self, client: QueryClient, request: ProbeRequest):
        self.client = client
        self.request = request

    def run(self) -> ProbeResult:
        try:
            return self._run()
        except ProbeError as e:
            logger.error(f"Check for {self.request.instance} aborted: {e.message}")
            return ProbeResult(
                severity=Severity.CRITICAL,
                message=f"{Severity.CRITICAL.prefix}{e.message}",
            )

    def _run(self) -> ProbeResult:
        liveness = self.client.probe(QueryKind.LIVENESS)
        if liveness.severity > Severity.OK:
            return liveness
        up = parse_int(liveness.message)
        if up == 0:
            raise ZeroLivenessError(self.request.instance)

        duration_result = self.client.probe(QueryKind.SCRAPE_DURATION)
        if duration_result.severity > Severity.OK:
            return duration_result
        duration = parse_float(duration_result.message)
        severity = evaluate_duration(
            duration, self.request.timeout_warning, self.request.timeout_critical
        )
        logger.info(
            f"Scrape duration {duration}s for {self.request.instance} is {severity.name}"
        )

        samples = self.client.probe(QueryKind.SAMPLE_COUNT)
        if samples.severity > Severity.OK:
            return samples

        return ProbeResult(
            severity=severity,
            message=format_status(
                severity,
                duration,
                self.request.timeout_warning,
                self.request.timeout_critical,
                samples.message,
            ),
        )
