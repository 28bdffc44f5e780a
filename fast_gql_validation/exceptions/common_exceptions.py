from typing import Optional


class ValidationRuleException(ValueError):
    """
    Raised by rule predicates when a value breaks a configured rule.

    The validator catches it at the node it was raised for and reports it as a
    violation at `loc`, or at the node's own path when `loc` is not given.
    """

    def __init__(
        self,
        message: str,
        *,
        loc: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.loc = loc


class DirectiveConfigurationException(ValueError):
    """A rule declaration that can never be satisfied as written. Fails schema construction."""

    def __init__(self, location: str, reason: str):
        super().__init__(f"[DIRECTIVE INVALID] `{location}`: {reason}")
        self.location = location
        self.reason = reason
