# user_browser/errors.py

class GatewayError(Exception):
    """Base class for all errors raised while talking to the user service."""
    pass

class NetworkError(GatewayError):
    """Transport failure: the service could not be reached or did not answer."""
    pass

class ServiceStatusError(NetworkError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url

class DecodeError(GatewayError):
    """A response arrived but does not parse into the expected user records."""
    pass

class ConfigError(Exception):
    """Error related to configuration."""
    pass
