"""
Field Generators

Generates the individual fields of a synthetic person:
- Names (first, last)
- Identifiers (short hex ids)
- Email addresses derived from usernames
- Dates of birth
- Phone numbers (US format)
- Physical addresses (currently a canned value)

Each generator draws from the random source handed to it and from small
fixed candidate lists, so the output is plausible but entirely fictitious.
"""

from typing import List, Optional

from .base import RandomSource, default_random_source, random_choice, random_int, random_hex_id
from ..models import Address


class NameGenerator:
    """Draw first and last names from fixed candidate lists"""

    FIRST_NAMES = ["James", "John", "Emma", "Olivia", "William", "Sophia"]
    LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia"]

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        first_names: Optional[List[str]] = None,
        last_names: Optional[List[str]] = None
    ):
        self.rng = rng or default_random_source()
        self.first_names = first_names or self.FIRST_NAMES
        self.last_names = last_names or self.LAST_NAMES

    def first_name(self) -> str:
        return random_choice(self.rng, self.first_names)

    def last_name(self) -> str:
        return random_choice(self.rng, self.last_names)


class IdentifierGenerator:
    """
    Generate short identifiers

    Ids are a random integer below ``upper`` rendered in base 16. They are
    not checked for uniqueness, so collisions within a batch are possible.
    """

    def __init__(self, rng: Optional[RandomSource] = None, upper: int = 10000):
        self.rng = rng or default_random_source()
        self.upper = upper

    def generate(self) -> str:
        return random_hex_id(self.rng, self.upper)


class EmailGenerator:
    """
    Generate email addresses

    Format: <username>@<domain>
    """

    DOMAINS = ["gmail.com", "yahoo.com", "outlook.com", "example.com"]

    def __init__(self, rng: Optional[RandomSource] = None, domains: Optional[List[str]] = None):
        """
        Initialize email generator

        Args:
            rng: Random source
            domains: Custom domain list (uses defaults if None)
        """
        self.rng = rng or default_random_source()
        self.domains = domains or self.DOMAINS

    def domain(self) -> str:
        return random_choice(self.rng, self.domains)

    def generate(self, username: str) -> str:
        """Build an address for ``username`` on a randomly drawn domain"""
        return f"{username}@{self.domain()}"


class DateGenerator:
    """
    Generate ISO-like dates (YYYY-MM-DD)

    Years span ``start_year`` to ``start_year + year_span - 1``. Days are
    capped at 28 so every month/day pair is a valid calendar date.
    """

    def __init__(self, rng: Optional[RandomSource] = None, start_year: int = 1970, year_span: int = 30):
        self.rng = rng or default_random_source()
        self.start_year = start_year
        self.year_span = year_span

    def generate(self) -> str:
        year = random_int(self.rng, self.start_year, self.year_span)
        month = random_int(self.rng, 1, 12)
        day = random_int(self.rng, 1, 28)
        return f"{year}-{month:02d}-{day:02d}"


class PhoneGenerator:
    """
    Generate US phone numbers

    Format: +1 (AAA) PPP-LLLL
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng or default_random_source()

    def generate(self) -> str:
        area_code = random_int(self.rng, 200, 800)
        prefix = random_int(self.rng, 100, 900)
        line_number = random_int(self.rng, 1000, 9000)
        return f"+1 ({area_code}) {prefix}-{line_number}"


class AddressGenerator:
    """
    Generate physical addresses

    Every address is the same canned value; no random draws are made.
    """

    STREET = "123 Main St"
    CITY = "Springfield"
    STATE = "IL"
    COUNTRY = "USA"
    ZIP_CODE = "62701"

    def generate(self) -> Address:
        return Address(
            street=self.STREET,
            city=self.CITY,
            state=self.STATE,
            country=self.COUNTRY,
            zip_code=self.ZIP_CODE,
        )
