"""Default connection settings for api.weather.gov."""

NWS_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "weathergov/0.1.0"
DEFAULT_TIMEOUT_SECONDS = 30.0
