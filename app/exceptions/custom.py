class ConfigurationError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ResolutionError(Exception):
    def __init__(self, message: str, address: str | None = None):
        self.message = message
        self.address = address
        super().__init__(message)


class GooglePlacesError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
