import logging
from typing import Optional

import typer

from config.config import Config
from config.logging_config import setup_logging
from contracts.probe_request import ProbeRequest
from contracts.probe_result import ProbeResult
from core.evaluator import Evaluator
from core.query_client import QueryClient

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Check a Prometheus scrape target's health, scrape duration and sample count.",
)


def check(request: ProbeRequest) -> ProbeResult:
    """
    Run all checks for one scrape target and return the overall result.
    """
    with QueryClient(request) as client:
        return Evaluator(client, request).run()


@app.command()
def run(
    instance: str = typer.Option(Config.INSTANCE, help="Instance name"),
    tags: str = typer.Option(Config.TAGS, help="Tags"),
    timeout_warning: float = typer.Option(Config.TIMEOUT_WARNING, help="Timeout warning"),
    timeout_critical: float = typer.Option(
        Config.TIMEOUT_CRITICAL, help="Timeout critical"
    ),
    url: str = typer.Option(Config.PROMETHEUS_QUERY_URL, help="Query API endpoint"),
    request_timeout: Optional[float] = typer.Option(
        Config.REQUEST_TIMEOUT,
        help="Seconds to wait for each query API call (unbounded when unset)",
    ),
):
    setup_logging()
    request = ProbeRequest(
        url=url,
        instance=instance,
        tags=tags,
        timeout_warning=timeout_warning,
        timeout_critical=timeout_critical,
        request_timeout=request_timeout,
    )
    result = check(request)
    logger.info(f"Check for {instance} finished with {result.severity.name}")
    typer.echo(result.message)
    raise typer.Exit(code=int(result.severity))


if __name__ == "__main__":
    app()
