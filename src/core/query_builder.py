from contracts.probe_request import ProbeRequest
from contracts.query_kind import QueryKind


def build_query(kind: QueryKind, request: ProbeRequest) -> str:
    """
    Build the PromQL selector for one of the fixed queries.

    The tag fragment is inserted verbatim inside the brace group, wrapped in
    double quotes, without escaping. A malformed fragment produces a malformed
    query which the backend rejects.

    Args:
        kind (QueryKind): Which metric to select.
        request (ProbeRequest): Supplies the instance and tag fragment.

    Returns:
        str: e.g. ``up{instance="web1"}``.
    """
    selector = f'instance="{request.instance}"'
    if request.tags:
        selector = f'{selector},"{request.tags}"'
    return f"{kind.metric_name}{{{selector}}}"
