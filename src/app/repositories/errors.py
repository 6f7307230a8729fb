class DuplicateKeyError(Exception):
    """Raised by repositories when an insert violates a uniqueness constraint"""

    def __init__(self, entity: str, detail: str = ""):
        self.entity = entity
        self.detail = detail
        super().__init__(f"Duplicate {entity}: {detail}" if detail else f"Duplicate {entity}")
