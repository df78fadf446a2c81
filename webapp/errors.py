# webapp/errors.py


class StartupError(Exception):
    """Anything that must stop the app before it starts serving."""


class ConfigError(StartupError):
    pass


class RegistrationError(StartupError):
    def __init__(self, name: str, cause: BaseException):
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to register {name!r}: {cause}")


class DatabaseConnectionError(StartupError):
    pass
