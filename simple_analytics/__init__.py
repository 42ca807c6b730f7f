from .client import API_URL, ReportClient, authenticate, from_env
from .errors import InvalidPropertiesError, NotSuccessfulResponseError
from .models import ReportResult
from .query import REQUIRED_PROPERTIES

__version__ = "0.1.0"

__all__ = [
    "API_URL",
    "REQUIRED_PROPERTIES",
    "InvalidPropertiesError",
    "NotSuccessfulResponseError",
    "ReportClient",
    "ReportResult",
    "authenticate",
    "from_env",
]
