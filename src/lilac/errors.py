"""Exception classes for Lilac.

Provides standardized exceptions for error handling throughout Lilac.
"""

from __future__ import annotations


class LilacError(Exception):
    """Base exception for all Lilac errors.

    Subclass this for specific error categories.
    """

    pass


class RuleError(LilacError):
    """Error in a highlighting rule definition.

    Raised when a rule is misconfigured, most importantly when its
    pattern can match an empty span (the encoder would never advance).
    Always raised at construction time, never while formatting.
    """

    def __init__(
        self,
        message: str,
        css_class: str | None = None,
        pattern: str | None = None,
    ) -> None:
        """Initialize rule error.

        Args:
            message: Description of the defect
            css_class: Class tag of the offending rule (optional)
            pattern: Source of the offending pattern (optional)
        """
        self.css_class = css_class
        self.pattern = pattern

        prefix = f"Rule '{css_class}'" if css_class else "Rule"
        suffix = f" (pattern {pattern!r})" if pattern is not None else ""
        super().__init__(f"{prefix}{suffix}: {message}")


class SampleError(LilacError):
    """Error while interpreting a sample record.

    Raised (or collected, see load_samples) when an entry of the sample
    document cannot be turned into a Sample.
    """

    def __init__(
        self,
        reason: str,
        index: int | None = None,
        name: str | None = None,
    ) -> None:
        """Initialize sample error.

        Args:
            reason: Why the entry was rejected
            index: Position of the entry in the source document (optional)
            name: Sample name, when it could be read (optional)
        """
        self.reason = reason
        self.index = index
        self.name = name

        location = ""
        if index is not None:
            location = f"Sample #{index}"
        if name:
            location = f"{location} '{name}'" if location else f"Sample '{name}'"
        if location:
            location += ": "

        super().__init__(f"{location}{reason}")


class UnknownFormatterError(LilacError):
    """Error when a formatter id is not registered.

    Only raised by strict lookups; regular resolution falls back to the
    registry's default formatter.
    """

    def __init__(self, name: str, available: frozenset[str] | None = None) -> None:
        """Initialize unknown formatter error.

        Args:
            name: The id that failed to resolve
            available: Registered names, for the message (optional)
        """
        self.name = name
        self.available = available or frozenset()

        hint = ""
        if self.available:
            hint = f" (available: {', '.join(sorted(self.available))})"
        super().__init__(f"Unknown formatter '{name}'{hint}")
