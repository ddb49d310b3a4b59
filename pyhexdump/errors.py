# pyhexdump/errors.py


class HexdumpError(Exception):
    """Base class for errors raised by pyhexdump itself."""


class UsageError(HexdumpError):
    """The command line could not be turned into a valid invocation."""


class InvalidLengthError(UsageError):
    """The value given to ``-n`` is not a non-negative integer."""

    def __init__(self, value: str):
        super().__init__("Invalid length argument")
        self.value = value
