"""
Name table exceptions

All exceptions raised by the name table layer.
"""


class InvalidNamesList(ValueError):
    """Raised when a replacement names list does not match the table length"""

    def __init__(self, category, expected, actual):
        self.category = category
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"invalid new names list for {category}: expected {expected} names, got {actual}"
        )
