from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION_SQLSTATE = "23505"
UNIQUE_VIOLATION_MARKERS = ("UNIQUE constraint failed", "Duplicate entry")


def is_unique_violation(exc: IntegrityError) -> bool:
    """True if the driver reports a unique constraint violation (sqlite, postgres, mysql)"""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == UNIQUE_VIOLATION_SQLSTATE:
        return True
    message = str(orig)
    return any(marker in message for marker in UNIQUE_VIOLATION_MARKERS)
