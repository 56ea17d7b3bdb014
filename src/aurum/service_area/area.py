"""ServiceArea aggregate — one serviceable pincode.

The pincode itself is the identity, which gives the registry set semantics:
a code is either present or not. Format and region rules live in
``RegionPolicy``; the registry accepts any code it is handed.

Removing a code deactivates its aggregate, and adding it again reinstates
the same one.
"""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, String

from aurum.domain import aurum


@aurum.event(part_of="ServiceArea")
class ServiceAreaAdded:
    __version__ = "v1"

    code = String(required=True, max_length=20)
    added_at = DateTime(required=True)


@aurum.event(part_of="ServiceArea")
class ServiceAreaRemoved:
    __version__ = "v1"

    code = String(required=True, max_length=20)
    removed_at = DateTime(required=True)


@aurum.aggregate
class ServiceArea:
    code = String(identifier=True, max_length=20)
    added_at = DateTime()
    is_active = Boolean(default=True)

    @classmethod
    def create(cls, code):
        now = datetime.now(UTC)
        area = cls(code=code, added_at=now)
        area.raise_(ServiceAreaAdded(code=code, added_at=now))
        return area

    def reinstate(self):
        """Serve a previously removed code again. Returns ``False`` if it was already served."""
        if self.is_active:
            return False

        self.is_active = True
        self.added_at = datetime.now(UTC)
        self.raise_(ServiceAreaAdded(code=self.code, added_at=self.added_at))
        return True

    def remove(self):
        """Stop serving the code. Returns ``False`` if it was already removed."""
        if not self.is_active:
            return False

        self.is_active = False
        self.raise_(ServiceAreaRemoved(code=self.code, removed_at=datetime.now(UTC)))
        return True
