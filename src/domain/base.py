import secrets


def generate_object_id() -> str:
    """24 hex chars, same shape as a document-store object id"""
    return secrets.token_hex(12)
