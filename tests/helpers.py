import httpx

QUERY_URL = "http://127.0.0.1:9090/api/v1/query"


def vector(value, instance="web1"):
    return {
        "status": "success",
        "data": {
            "resultType": "vector",
            "result": [
                {
                    "metric": {"instance": instance, "job": "node"},
                    "value": [1435781451.781, value],
                }
            ],
        },
    }


def empty_vector():
    return {"status": "success", "data": {"resultType": "vector", "result": []}}


class FakePrometheus:
    """
    Serves canned responses per metric name and records every query received.
    """

    def __init__(self, responses):
        self.responses = responses
        self.queries = []

    def metric_of(self, query):
        return query.split("{", 1)[0]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        query = request.url.params["query"]
        self.queries.append(query)
        response = self.responses[self.metric_of(query)]
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)

    def client(self):
        return httpx.Client(transport=httpx.MockTransport(self))
