class Base85Error(Exception):
    kind = "base85"


class DescriptorError(Base85Error, ValueError):
    kind = "descriptor"


class DecodeError(Base85Error, ValueError):
    kind = "data"

    def __init__(self, message: str, *, position: int = None, symbol: int = None):
        super().__init__(message)
        self.position = position
        self.symbol = symbol
