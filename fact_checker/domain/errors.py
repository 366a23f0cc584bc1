"""Errors raised when a fact-check cannot be started."""

from typing import List


class FactCheckPreconditionError(ValueError):
    """Base class for caller input errors."""

    title = "Fact-Check Failed"
    description = "Unable to verify this statement."


class EmptyClaimError(FactCheckPreconditionError):
    """Raised when the claim text is empty after trimming."""

    def __init__(self):
        super().__init__("No text was provided to fact-check")


class NoProvidersError(FactCheckPreconditionError):
    """Raised when no evidence providers are configured."""

    def __init__(self):
        super().__init__("No evidence providers are configured")


class MissingCredentialsError(FactCheckPreconditionError):
    """Raised when one or more providers have no API key."""

    title = "Configuration Error"
    description = "Please configure all API keys in the extension popup."

    def __init__(self, providers: List[str]):
        self.providers = providers
        super().__init__(
            f"Missing API key for: {', '.join(providers)}. "
            "Enter the API key of every provider before fact-checking."
        )
