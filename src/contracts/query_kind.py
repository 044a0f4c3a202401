from enum import Enum


class QueryKind(Enum):
    """
    The three fixed queries issued against the query API, valued by metric name.
    """

    LIVENESS = "up"
    SCRAPE_DURATION = "scrape_duration_seconds"
    SAMPLE_COUNT = "scrape_samples_scraped"

    @property
    def metric_name(self) -> str:
        return self.value
