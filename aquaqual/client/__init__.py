"""HTTP client session for the AquaQual chat API."""
