"""
User Generator

Coordinates the field generators to build complete ``User`` records.
Username, email and avatar are derived from fields drawn in the same call.
"""

from typing import Optional
import logging

from .base import EntityGenerator, RandomSource
from .fields import (
    NameGenerator,
    IdentifierGenerator,
    EmailGenerator,
    DateGenerator,
    PhoneGenerator,
    AddressGenerator,
)
from ..models import User, UserProfile

logger = logging.getLogger(__name__)

AVATAR_URL_TEMPLATE = "https://avatars.dicebear.com/api/human/{username}.svg"


class UserGenerator(EntityGenerator):
    """
    Generate synthetic users

    Draw order per user: first name, last name, id, username suffix,
    email domain, date of birth (year, month, day), phone (area code,
    prefix, line number).
    """

    def __init__(self, rng: Optional[RandomSource] = None, locale: str = "en-US"):
        super().__init__(rng=rng, locale=locale)

        # Sub-generators share one random source
        self.name_generator = NameGenerator(self.rng)
        self.id_generator = IdentifierGenerator(self.rng)
        self.email_generator = EmailGenerator(self.rng)
        self.date_generator = DateGenerator(self.rng)
        self.phone_generator = PhoneGenerator(self.rng)
        self.address_generator = AddressGenerator()

    @staticmethod
    def make_username(first_name: str, last_name: str, suffix: str) -> str:
        return f"{first_name}{last_name}{suffix}".lower()

    @staticmethod
    def make_avatar_url(username: str) -> str:
        return AVATAR_URL_TEMPLATE.format(username=username)

    def generate(self) -> User:
        """
        Generate one user

        Returns:
            User with profile and address fully populated
        """
        first_name = self.name_generator.first_name()
        last_name = self.name_generator.last_name()

        user_id = self.id_generator.generate()
        username = self.make_username(first_name, last_name, self.id_generator.generate())
        email = self.email_generator.generate(username)

        profile = UserProfile(
            first_name=first_name,
            last_name=last_name,
            date_of_birth=self.date_generator.generate(),
            phone=self.phone_generator.generate(),
            avatar_url=self.make_avatar_url(username),
        )

        user = User(
            id=user_id,
            username=username,
            email=email,
            profile=profile,
            address=self.address_generator.generate(),
        )

        logger.debug(f"Generated user: {user.username}")
        return user
