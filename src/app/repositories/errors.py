class DuplicateKeyError(Exception):
    """Raised by a repository when a write violates a uniqueness constraint"""

    code = "DUPLICATE_KEY"

    def __init__(self, message: str = "Duplicate key"):
        self.message = message
        super().__init__(message)
