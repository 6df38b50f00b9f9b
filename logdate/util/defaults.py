"""Default values for logdate."""

RESERVED_TIMESTAMP_FIELD = "@timestamp"
"""The canonical event time field of the pipeline. Processors must not write to it."""

DEFAULT_DATE_FORMAT_FAILURE_TAG = "_dateformatfailure"
