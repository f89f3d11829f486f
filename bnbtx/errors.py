class BinanceError(Exception):
    """Base class for failures talking to the Binance explorer or RPC node."""


class NotFoundError(BinanceError):
    def __init__(self, message: str = "not found"):
        super().__init__(message)


class InvalidAddressError(BinanceError):
    def __init__(self, message: str = "invalid address"):
        super().__init__(message)


class SourceConnectionError(BinanceError):
    def __init__(self, message: str = "connection to Binance API failed"):
        super().__init__(message)


class BinanceAPIError(BinanceError):
    """The upstream answered, but with an error payload or an unexpected shape."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"Binance API error {code}: {message}")
