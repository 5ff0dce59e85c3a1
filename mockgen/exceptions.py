"""Errors raised by the mock data generator"""


class MockDataError(Exception):
    """Base error for mock data generation failures"""


class UnsupportedTypeError(MockDataError, ValueError):
    """Raised when no generator is registered for the requested entity kind"""

    def __init__(self, entity_type: str):
        self.entity_type = entity_type
        super().__init__(f"Unsupported data type: {entity_type}")
