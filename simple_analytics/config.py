import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

SERVICE_ACCOUNT_EMAIL_VAR = "GA_SERVICE_ACCOUNT_EMAIL"
CREDENTIALS_PATH_VAR = "GOOGLE_APPLICATION_CREDENTIALS"

DEFAULT_TIMEOUT = 30.0


def get_service_account_email():
    return os.getenv(SERVICE_ACCOUNT_EMAIL_VAR)


def get_credentials_path():
    return os.getenv(CREDENTIALS_PATH_VAR)


def get_request_timeout() -> float:
    """HTTP timeout in seconds for report requests."""
    return float(os.getenv("SIMPLE_ANALYTICS_TIMEOUT", DEFAULT_TIMEOUT))
