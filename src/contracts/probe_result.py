from pydantic import BaseModel

from contracts.severity import Severity


class ProbeResult(BaseModel):
    """
    Outcome of a single probe or of a whole run: a severity and the line to print.
    """

    severity: Severity
    message: str
