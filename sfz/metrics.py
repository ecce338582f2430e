from __future__ import annotations

from prometheus_client import Counter


SFZ_REQUESTS_TOTAL = Counter(
    "sfz_requests_total",
    "Requests served grouped by resolved target kind",
    labelnames=("kind",),
)
SFZ_REQUEST_ERRORS_TOTAL = Counter(
    "sfz_request_errors_total",
    "Contained request errors grouped by error class",
    labelnames=("error",),
)

__all__ = ["SFZ_REQUESTS_TOTAL", "SFZ_REQUEST_ERRORS_TOTAL"]
