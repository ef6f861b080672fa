"""Ordering bounded context — Shopping Cart and Order placement.

Owns the per-user shopping cart (single active shop, merge-by-identity line
items) and the immutable Order it is converted into at placement. Users, shops
and menus belong to other contexts; their facts are read through the external
fact provider before any local state changes.
"""

import structlog
from protean.domain import Domain
from shared.logging import configure_logging

configure_logging()

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
