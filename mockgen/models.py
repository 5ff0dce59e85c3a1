"""
Data Model Module

Plain record types produced and consumed by the generator:
- MockDataRequest: a generation request (kind, count, format, seed, locale)
- User, UserProfile, Address: the generated user entity
- DatasetMetrics: dataset statistics payload
- MockDataTemplate, GenerationRule: template declarations (accepted, not applied)

Every record exposes ``to_dict()`` which emits the wire (camelCase) field
names in declaration order.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

# Ordered str -> str mapping, serialized as a JSON object
StringMap = Dict[str, str]


@dataclass
class GenerationRule:
    """Field generation rule (declared for templates, never applied)"""
    type: str
    pattern: str = ""
    min: int = 0
    max: int = 100
    options: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "pattern": self.pattern,
            "min": self.min,
            "max": self.max,
            "options": list(self.options),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationRule":
        return cls(
            type=str(data["type"]),
            pattern=str(data.get("pattern", "")),
            min=int(data.get("min", 0)),
            max=int(data.get("max", 100)),
            options=[str(option) for option in data.get("options", [])],
        )


@dataclass
class MockDataTemplate:
    """Named record template (declared for forward compatibility, never applied)"""
    name: str
    schema: str
    rules: StringMap = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "schema": self.schema,
            "rules": dict(self.rules),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MockDataTemplate":
        rules = data.get("rules") or {}
        return cls(
            name=str(data["name"]),
            schema=str(data["schema"]),
            rules={str(key): str(value) for key, value in rules.items()},
        )


@dataclass
class MockDataRequest:
    """
    A request for mock data

    ``seed``, ``locale`` and ``template`` are accepted and carried through
    to the generator, but they do not influence the generated values.
    """
    type: str
    count: int
    format: str = "json"
    seed: str = ""
    locale: str = "en-US"
    template: Optional[MockDataTemplate] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "count": self.count,
            "format": self.format,
            "seed": self.seed,
            "locale": self.locale,
            "template": self.template.to_dict() if self.template else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MockDataRequest":
        """
        Build a request from its wire form

        Args:
            data: Dictionary with ``type`` and ``count`` and optional
                ``format``, ``seed``, ``locale`` and ``template`` keys

        Returns:
            MockDataRequest
        """
        missing = [key for key in ("type", "count") if key not in data]
        if missing:
            raise ValueError(f"Missing required request fields: {', '.join(missing)}")

        template = data.get("template")

        return cls(
            type=str(data["type"]),
            count=int(data["count"]),
            format=str(data.get("format") or "json"),
            seed=str(data.get("seed") or ""),
            locale=str(data.get("locale") or "en-US"),
            template=MockDataTemplate.from_dict(template) if template else None,
        )


@dataclass
class DatasetMetrics:
    """Dataset statistics payload (always emitted with default values)"""
    unique_values: int = 0
    null_count: int = 0
    distribution: StringMap = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "uniqueValues": self.unique_values,
            "nullCount": self.null_count,
            "distribution": dict(self.distribution),
        }


@dataclass
class UserProfile:
    """Personal details of a generated user"""
    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""
    phone: str = ""
    avatar_url: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "dateOfBirth": self.date_of_birth,
            "phone": self.phone,
            "avatar": self.avatar_url,
        }


@dataclass
class Address:
    """Postal address of a generated user"""
    street: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    zip_code: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "country": self.country,
            "zipCode": self.zip_code,
        }


@dataclass
class User:
    """A generated user record"""
    id: str = ""
    username: str = ""
    email: str = ""
    profile: UserProfile = field(default_factory=UserProfile)
    address: Address = field(default_factory=Address)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "profile": self.profile.to_dict(),
            "address": self.address.to_dict(),
        }
