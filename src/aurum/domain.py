"""Aurum bounded context — catalogue, service areas, shopping cart and order ledger.

All state lives in Protean's in-memory providers. Every mutation is a command
processed synchronously inside a unit of work, so a command either commits
completely or leaves no trace.
"""

import structlog
from protean.domain import Domain

from aurum.utils.logging import configure_logging

configure_logging()

aurum = Domain(name="aurum")

logger = structlog.get_logger(__name__)
