"""Application-level constants."""

# Metric value when no service path was supplied
SERVICE_NOT_APPLICABLE = "N/A"

# Log line emitted for every recorded error
ERROR_LOG_TEMPLATE = "Exception added to metric - Label: %s. Category: %s. Source: %s. Service: %s. %s."
