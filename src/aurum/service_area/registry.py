"""Service area registry — commands, handler and reads."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from aurum.domain import aurum
from aurum.service_area.area import ServiceArea
from aurum.shared.queries import fetch_all, find, find_any

logger = structlog.get_logger(__name__)


@aurum.command(part_of="ServiceArea")
class AddServiceArea:
    code = String(required=True, max_length=20)


@aurum.command(part_of="ServiceArea")
class RemoveServiceArea:
    code = String(required=True, max_length=20)


@aurum.command_handler(part_of=ServiceArea)
class ServiceAreaRegistryHandler:
    @handle(AddServiceArea)
    def add_service_area(self, command):
        """Return ``True`` if the code was added, ``False`` if it was already served."""
        area = find_any(ServiceArea, command.code)
        if area is None:
            area = ServiceArea.create(command.code)
        elif not area.reinstate():
            logger.info("Service area already registered", code=command.code)
            return False

        current_domain.repository_for(ServiceArea).add(area)
        logger.info("Service area added", code=command.code)
        return True

    @handle(RemoveServiceArea)
    def remove_service_area(self, command):
        """Return ``True`` if a code was removed."""
        area = find(ServiceArea, command.code)
        if area is None or not area.remove():
            return False

        current_domain.repository_for(ServiceArea).add(area)
        logger.info("Service area removed", code=command.code)
        return True


def is_serviceable(code):
    if not code:
        return False
    return find(ServiceArea, code) is not None


def list_service_areas():
    return sorted(area.code for area in fetch_all(ServiceArea))
