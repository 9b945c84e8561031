"""Constants used in business logic."""

# Authorization header carrying the API key
DEFAULT_API_KEY_HEADER_NAME = "Authorization"
# Scheme preceding the API key, compared case-sensitively
DEFAULT_API_KEY_SCHEME = "ApiKey"

# Messages of the authorization header errors
NO_AUTH_HEADER_MESSAGE = "no authorization header included"
MALFORMED_AUTH_HEADER_MESSAGE = "malformed authorization header"

# Logging
LOG_LEVEL_ENV_VAR = "API_KEY_AUTH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
