"""External fact provider factory.

Provides get_fact_provider() / set_fact_provider() to swap implementations:
- HttpFactProvider (configured from the environment) by default
- FakeFactProvider for development and testing
"""

from ordering.facts.http_adapter import HttpFactProvider
from ordering.facts.port import ExternalFactProvider

_current_provider: ExternalFactProvider | None = None


def get_fact_provider() -> ExternalFactProvider:
    """Return the current fact provider. Defaults to HttpFactProvider.from_env()."""
    global _current_provider
    if _current_provider is None:
        _current_provider = HttpFactProvider.from_env()
    return _current_provider


def set_fact_provider(provider: ExternalFactProvider) -> None:
    """Override the active fact provider (useful for tests)."""
    global _current_provider
    _current_provider = provider


def reset_fact_provider() -> None:
    """Reset to default provider."""
    global _current_provider
    _current_provider = None
