class Q3ServerListError(Exception):
    pass


class UsageError(Q3ServerListError):
    def __init__(self, message, exit_code=1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class ResolutionError(Q3ServerListError):
    pass


class TransportError(Q3ServerListError):
    pass


class DecodeError(Q3ServerListError):
    """A datagram or record that could not be decoded. Never fatal."""


class InfoStringError(DecodeError):
    pass
