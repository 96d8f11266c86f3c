"""Closed set of user roles and the route allow-lists built from them."""

from enum import Enum


class Role(str, Enum):
    SUPER_ADMIN = "super-admin"
    ADMIN_DISTANCE1 = "admin-distance1"
    ADMIN_DISTANCE2 = "admin-distance2"

    @classmethod
    def parse(cls, value: str) -> "Role | None":
        """Return the Role for value, or None if value is not a known role."""
        try:
            return cls(value)
        except ValueError:
            return None


ROLE_VALUES: frozenset[str] = frozenset(r.value for r in Role)

# Per-sensor reader roles; super-admin can read every sensor.
SENSOR_READER_ROLES: dict[str, tuple[Role, ...]] = {
    "1": (Role.ADMIN_DISTANCE1, Role.SUPER_ADMIN),
    "2": (Role.ADMIN_DISTANCE2, Role.SUPER_ADMIN),
}
