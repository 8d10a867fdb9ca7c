from user_dashboard.clients.users_api.config import ClientConfig, ConfigError, load_config
from user_dashboard.clients.users_api.errors import ApiError, ResponseFailure, TransportFailure
from user_dashboard.clients.users_api.http_client import HttpClient
from user_dashboard.clients.users_api.models import Address, Company, Geo, User
from user_dashboard.clients.users_api.users_client import USERS_PATH, UsersClient

__all__ = [
    "ClientConfig",
    "ConfigError",
    "load_config",
    "ApiError",
    "TransportFailure",
    "ResponseFailure",
    "HttpClient",
    "UsersClient",
    "USERS_PATH",
    "User",
    "Address",
    "Company",
    "Geo",
]
