"""Read helpers over the memory repositories.

Deleted products, categories and service areas stay in their repository
with ``is_active = False`` so a re-used identity revives the same aggregate
and its event stream. Every helper here except ``find_any`` hides them.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

# The query layer pages results; the storefront never holds more than this.
QUERY_LIMIT = 10_000


def is_live(record):
    return getattr(record, "is_active", True) is not False


def fetch_all(aggregate_cls, **filters):
    """Return every live record of ``aggregate_cls`` matching ``filters``."""
    query = current_domain.repository_for(aggregate_cls)._dao.query
    if filters:
        query = query.filter(**filters)
    return [record for record in query.limit(QUERY_LIMIT).all().items if is_live(record)]


def find_any(aggregate_cls, identifier):
    """Return the record with ``identifier``, deleted or not, or ``None``."""
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        return None


def find(aggregate_cls, identifier):
    """Return the live record with ``identifier`` or ``None``."""
    record = find_any(aggregate_cls, identifier)
    if record is None or not is_live(record):
        return None
    return record


def load(aggregate_cls, identifier):
    """Return the live record with ``identifier`` or raise ``ObjectNotFoundError``."""
    record = find(aggregate_cls, identifier)
    if record is None:
        raise ObjectNotFoundError(f"{aggregate_cls.__name__} with identifier {identifier} does not exist")
    return record
