"""Constants for the climate chat pipeline."""

MODEL_NAME = "openai/gpt-oss-120b"

# Fixed generation parameters for every completion
TEMPERATURE = 0.7
MAX_TOKENS = 4096
TOP_P = 0.9
FREQUENCY_PENALTY = 0.1

SENTINEL_PREFIX = '{"parsed":'

APOLOGY_MESSAGE = "Sorry, something went wrong. Please try again."

# Error messages returned to the caller
INVALID_BODY_ERROR = "Invalid request body"
MISSING_MESSAGE_ERROR = "Message is required and must be a string"
MISSING_API_KEY_ERROR = "Groq API key not set"
DATA_ERROR = "Internal data error"
EMPTY_RESPONSE_ERROR = "Empty response from model"
CHAT_FAILED_ERROR = "Chat processing failed"
