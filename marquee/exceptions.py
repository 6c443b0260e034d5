"""
Custom exception hierarchy for Marquee.

Provides specific exception types for the failure modes of the marquee:
recoverable payload decode errors and fatal input/synchronization/config
errors.
"""


class MarqueeError(Exception):
    """Base exception for all Marquee errors."""
    
    def __init__(self, message: str, context: dict = None):
        """
        Initialize the exception.
        
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class DecodeError(MarqueeError):
    """Raised when a structured payload cannot be decoded. Recoverable."""
    
    def __init__(self, message: str, raw: str = None, cause: str = None, context: dict = None):
        """
        Initialize decode error.
        
        Args:
            message: Error message
            raw: The raw input value that failed to decode
            cause: The underlying parse or validation failure
            context: Optional context dictionary
        """
        if cause:
            context = context or {}
            context['cause'] = cause
        super().__init__(message, context)
        self.raw = raw
        self.cause = cause


class InputSourceError(MarqueeError):
    """Raised when the input feed's underlying read fails. Fatal."""


class SynchronizationError(MarqueeError):
    """Raised when the shared text register cannot be locked. Fatal."""
    
    def __init__(self, message: str, timeout: float = None, context: dict = None):
        if timeout is not None:
            context = context or {}
            context['timeout'] = timeout
        super().__init__(message, context)
        self.timeout = timeout


class ConfigError(MarqueeError):
    """Exception raised for configuration-related errors."""
    
    def __init__(self, message: str, config_path: str = None, field: str = None, context: dict = None):
        """
        Initialize config error.
        
        Args:
            message: Error message
            config_path: Optional path to config file
            field: Optional field name that caused the error
            context: Optional context dictionary
        """
        if config_path or field:
            context = context or {}
            if config_path:
                context['config_path'] = config_path
            if field:
                context['field'] = field
        super().__init__(message, context)
        self.config_path = config_path
        self.field = field
