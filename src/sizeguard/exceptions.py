# Custom exceptions for SizeGuard

class SizeGuardError(Exception):
    """Base exception for all application-specific errors."""
    pass

class ConfigError(SizeGuardError):
    """Raised for configuration-related problems."""
    def __init__(self, message: str, path: str = ""):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)

class InvalidSizeError(ConfigError):
    """Raised when a maxSize string cannot be parsed."""
    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid size '{value}': {reason}")

class DuplicateRuleError(ConfigError):
    """Raised when two bundle rules share the same name."""
    def __init__(self, name: str, path: str = ""):
        self.name = name
        super().__init__(f"Duplicate bundle entry for '{name}'", path=path)


class ProbeIOError(SizeGuardError):
    """Raised when an artifact's size cannot be measured."""

    def __init__(self, artifact: str, reason: str):
        self.artifact = artifact
        self.reason = reason
        super().__init__(f"Unable to measure {artifact}: {reason}")
