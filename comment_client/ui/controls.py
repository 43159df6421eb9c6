"""Identifiers of the input controls and output regions of the page."""

# Input controls
COMMENT_TEXT = "comment-text"
SEARCH_ID = "search-id"
UPDATE_ID = "update-id"
UPDATE_TEXT = "update-text"
DELETE_ID = "delete-id"
BATCH_FILE = "batch-file"
STATS_CUSTOM = "stats-custom"

# Output regions
COMMENT_RESULT = "comment-result"
SEARCH_RESULT = "search-result"
UPDATE_RESULT = "update-result"
STATS_RESULT = "stats-result"
HEADLINE_WORD = "headline-word"
