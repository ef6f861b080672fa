"""Shop bounded context — Menus and their option groups.

Handles menu authoring and the one-way Draft → Published transition that
gates when a menu's option groups may be shown to customers.
"""

import structlog
from protean.domain import Domain
from shared.logging import configure_logging

configure_logging()

shop = Domain(name="shop")

logger = structlog.get_logger(__name__)
