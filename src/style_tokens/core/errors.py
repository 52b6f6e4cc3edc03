"""
Error types for token resolution and format registration.
"""

from dataclasses import dataclass


class StyleTokensError(Exception):
    """Base exception for all style-tokens errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ReferenceResolutionError(StyleTokensError):
    """
    Raised when a token value cannot be dereferenced.

    Examples:
    - Reference to a token path that does not exist
    - References that loop back on themselves
    """

    pass


class UnresolvedReferenceError(ReferenceResolutionError):
    """Raised when a reference points at an unknown token path."""

    pass


class CircularReferenceError(ReferenceResolutionError):
    """Raised when following references revisits a token path."""

    pass


class FormatError(StyleTokensError):
    """
    Raised when a format cannot be registered or invoked.

    Examples:
    - Registering a name that is already taken
    - Registering something that is not callable
    """

    pass


class FormatNotFoundError(FormatError):
    """Raised when no format is registered under the requested name."""

    pass


class OptionsError(StyleTokensError):
    """Raised when format options have the wrong shape."""

    pass


@dataclass
class ErrorContext:
    """
    Where in the token tree an error occurred.

    Attributes:
        token: Name of the token being processed, if any
        field: Token field being resolved (e.g. ``fontSize``)
        chain: Reference paths followed before the failure
    """

    token: str | None = None
    field: str | None = None
    chain: tuple[str, ...] = ()

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "token Title1Bold, field fontSize (via a -> b)"
        """
        parts = []
        if self.token:
            parts.append(f"token {self.token}")
        if self.field:
            parts.append(f"field {self.field}")
        location = ", ".join(parts) or "token tree"
        if self.chain:
            location += f" (via {' -> '.join(self.chain)})"
        return location


def make_reference_error(
    message: str,
    chain: tuple[str, ...] = (),
    circular: bool = False,
) -> ReferenceResolutionError:
    """
    Helper to create a reference error with the followed chain attached.

    Args:
        message: Error description
        chain: Reference paths visited so far
        circular: Whether the failure is a reference cycle

    Returns:
        CircularReferenceError or UnresolvedReferenceError
    """
    context = ErrorContext(chain=chain) if chain else None
    if circular:
        return CircularReferenceError(message, context)
    return UnresolvedReferenceError(message, context)
