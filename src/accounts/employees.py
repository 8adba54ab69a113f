"""Employee helpers shared by the ORM models and the pure engines."""

ADMIN = "ADMIN"
CLOSER = "CLOSER"
SDR = "SDR"


def takes_part(employee) -> bool:
    """Default pool rule: every employee but administrators, active or not."""
    return employee.role != ADMIN


def display_name(employee) -> str:
    get_full_name = getattr(employee, "get_full_name", None)
    if callable(get_full_name):
        name = get_full_name()
        if name:
            return name
    return getattr(employee, "name", "") or str(employee.id)
