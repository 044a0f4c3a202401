import os


class Config:
    """
    Configuration class for environment variables and default settings.
    """

    PROMETHEUS_QUERY_URL = os.environ.get(
        "PROMETHEUS_QUERY_URL", "http://127.0.0.1:9090/api/v1/query"
    )
    INSTANCE = os.environ.get("PROBE_INSTANCE", "default")
    # Raw label-selector fragment appended after the instance matcher
    TAGS = os.environ.get("PROBE_TAGS", "")

    # Thresholds apply to the reported scrape_duration_seconds value
    TIMEOUT_WARNING = float(os.environ.get("PROBE_TIMEOUT_WARNING", "5.0"))
    TIMEOUT_CRITICAL = float(os.environ.get("PROBE_TIMEOUT_CRITICAL", "30.0"))

    # Unset means the query API call is not bounded
    REQUEST_TIMEOUT = (
        float(os.environ["PROBE_REQUEST_TIMEOUT"])
        if os.environ.get("PROBE_REQUEST_TIMEOUT")
        else None
    )
