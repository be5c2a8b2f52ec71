"""Constants for analysis routes."""

DEFAULT_SORT_KEY = "volume"
DEFAULT_SORT_DIRECTION = "desc"

ANALYSIS_IN_PROGRESS_DETAIL = "An analysis is already in progress. Wait for it to finish."
ANALYSIS_NOT_FOUND_DETAIL = "No analysis results available. Run an analysis first."
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
