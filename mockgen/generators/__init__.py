"""
Data Generators Module

Provides the record generators:
- Base: random source interface and draw helpers
- Fields: names, ids, emails, dates, phones, addresses
- User: complete user records
- Registry: entity kind lookup and the MockDataGenerator entry point
"""

from .base import RandomSource, EntityGenerator, default_random_source
from .fields import (
    NameGenerator,
    IdentifierGenerator,
    EmailGenerator,
    DateGenerator,
    PhoneGenerator,
    AddressGenerator,
)
from .user import UserGenerator
from .registry import (
    MockDataGenerator,
    GENERATOR_REGISTRY,
    register_generator,
    supported_types,
    is_supported,
)

__all__ = [
    # Base
    "RandomSource",
    "EntityGenerator",
    "default_random_source",

    # Field generators
    "NameGenerator",
    "IdentifierGenerator",
    "EmailGenerator",
    "DateGenerator",
    "PhoneGenerator",
    "AddressGenerator",

    # Entity generators
    "UserGenerator",

    # Registry
    "MockDataGenerator",
    "GENERATOR_REGISTRY",
    "register_generator",
    "supported_types",
    "is_supported",
]
