"""Host-level exceptions for minilisp.

Language-level failures are not exceptions: they are LispError values that
flow through the evaluator like any other value. The classes below cover the
few conditions that concern the host program itself.
"""


class MiniLispError(Exception):
    """ Base class for all minilisp host errors"""
    pass


class ConfigError(MiniLispError):
    """ Raised when a configuration value cannot be interpreted"""
