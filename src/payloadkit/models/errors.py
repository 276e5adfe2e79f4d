class PayloadKitError(Exception):
    """Base class for every error raised by payloadkit."""


class ConfigurationError(PayloadKitError):
    """Raised when a request spec cannot be resolved to a single payload.

    This happens when more than one payload variant is populated, or when a
    multipart spec whose streams were already consumed is encoded again.
    """

    def __init__(self, message="Request spec cannot contain more than one payload."):
        self.message = message
        super().__init__(self.message)


class EncodingError(PayloadKitError):
    """Raised when a payload cannot be serialized into a request body."""


class TransportError(PayloadKitError):
    """Raised when the delegated HTTP client fails.

    The original ``httpx`` exception is kept as ``__cause__`` and exposed
    through :attr:`original`.
    """

    def __init__(self, original: Exception):
        self.original = original
        super().__init__(str(original))
