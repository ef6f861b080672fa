"""Typed domain faults shared by every bounded context.

Each fault family is an ``ErrorCode`` enum whose members carry a stable
``(code, message)`` pair, plus one exception class per family. Faults subclass
Protean's ``ValidationError`` so the stock exception handlers (and any caller
already catching ``ValidationError``) keep treating them as rule violations.

Transport failures from external collaborators are deliberately NOT modelled
here; they surface as ``requests.RequestException``.
"""

from enum import Enum

from protean.exceptions import ValidationError


class ErrorCode(Enum):
    """Base for error-code enums. Member values are ``(code, message)`` tuples."""

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


class DomainError(ValidationError):
    """A business rule was violated.

    ``code`` is the stable machine-readable identifier (e.g. ``CART-DOMAIN-003``),
    ``error_code`` the enum member, ``message`` the human-readable text.
    """

    field = "domain"

    def __init__(self, error_code: ErrorCode, detail: str | None = None):
        self.error_code = error_code
        self.code = error_code.code
        self.message = f"{error_code.message}: {detail}" if detail else error_code.message
        super().__init__({self.field: [self.message]})

    @property
    def is_not_found(self) -> bool:
        return self.error_code.name.endswith("NOT_FOUND")
