# src/toolbridge/observability/names.py

"""Standard metric names for toolbridge observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Registry Client Metrics
# ============================================================================

# Duration (labels: operation)
REGISTRY_REQUEST_DURATION = "registry_request_duration"

# Counters
REGISTRY_REQUESTS_TOTAL = "registry_requests_total"  # labels: operation, provider
REGISTRY_ERRORS_TOTAL = "registry_errors_total"  # labels: operation, code

# Gauges (tools in the last list/search response)
REGISTRY_TOOLS_RETURNED = "registry_tools_returned"
