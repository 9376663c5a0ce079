"""Constants for neighborhood matching."""

# Matches at or below this score never reach the prompt
MATCH_THRESHOLD = 0.7
