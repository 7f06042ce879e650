from __future__ import annotations


class TssError(Exception):
    """ Base class for all tss errors"""

    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)
        self.line = line


class TssScanError(TssError):
    """ Raised when the tokenizer cannot turn source text into a token"""


class TssSyntaxError(TssError):
    """ Raised when a token stream or form has the wrong shape"""


class TssInvalidSymbol(TssError):
    """ Raised when something other than a name is used as a binding target"""


class TssUnboundSymbol(TssError):
    """ Raised when a symbol is used before it is bound"""


class TssNameError(TssError):
    """ Raised when a binding would clash with a reserved or existing name"""


class TssTypeError(TssError):
    """ Raised when a value of the wrong type is used"""
