"""Perch exception hierarchy.

Shared across the grammar compiler, the console route, and the CLI so
every module raises and catches the same types. Matching never raises:
a failed match is ``None``, not an exception.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when a console route is constructed with invalid options.

    Covers filters/validators in an unrecognised shape, factory options
    without a ``route`` key, and constraints that do not compile.
    """


class GrammarSyntaxError(PerchError):
    """Raised when a route definition cannot be compiled.

    ``remainder`` is the unconsumed suffix of the definition at the
    point where no lexical form matched.
    """

    def __init__(self, remainder: str, definition: str = "") -> None:
        self.remainder = remainder
        self.definition = definition
        super().__init__(f'Cannot understand console route at "{remainder}"')
