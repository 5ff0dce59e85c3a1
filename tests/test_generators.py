"""
Test Suite for Generators

Tests record generation:
- Field generators (names, ids, emails, dates, phones, addresses)
- UserGenerator derived fields and draw order
- MockDataGenerator kind lookup
"""

import random
import re

import pytest

from mockgen.exceptions import UnsupportedTypeError
from mockgen.generators import (
    GENERATOR_REGISTRY,
    AddressGenerator,
    DateGenerator,
    EmailGenerator,
    IdentifierGenerator,
    MockDataGenerator,
    NameGenerator,
    PhoneGenerator,
    UserGenerator,
    is_supported,
    register_generator,
    supported_types,
)
from mockgen.generators.base import random_choice, random_hex_id, random_int
from mockgen.models import User

DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
PHONE_PATTERN = re.compile(r"^\+1 \((\d{3})\) (\d{3})-(\d{4})$")


class TestDrawHelpers:
    """Test the draw helpers against known random values"""

    def test_random_int_bounds(self, fixed_random):
        assert random_int(fixed_random([0.0]), 200, 800) == 200
        assert random_int(fixed_random([0.999999]), 200, 800) == 999

    def test_random_choice_uses_floor(self, fixed_random):
        items = ["a", "b", "c", "d"]
        assert random_choice(fixed_random([0.0]), items) == "a"
        assert random_choice(fixed_random([0.5]), items) == "c"
        assert random_choice(fixed_random([0.99]), items) == "d"

    def test_random_hex_id(self, fixed_random):
        assert random_hex_id(fixed_random([0.0])) == "0"
        assert random_hex_id(fixed_random([0.5])) == "1388"
        assert random_hex_id(fixed_random([0.99999])) == "270f"


class TestFieldGenerators:
    """Test individual field generators"""

    def test_names_come_from_candidate_lists(self):
        generator = NameGenerator(random.Random(1))

        for _ in range(50):
            assert generator.first_name() in NameGenerator.FIRST_NAMES
            assert generator.last_name() in NameGenerator.LAST_NAMES

    def test_identifier_is_lowercase_hex(self):
        generator = IdentifierGenerator(random.Random(2))

        for _ in range(100):
            value = generator.generate()
            assert re.fullmatch(r"[0-9a-f]+", value)
            assert int(value, 16) < 10000

    def test_email_uses_username_and_known_domain(self, fixed_random):
        generator = EmailGenerator(fixed_random([0.3]))

        assert generator.generate("emmajones1f") == "emmajones1f@yahoo.com"

    def test_custom_domains(self, zero_random):
        generator = EmailGenerator(zero_random, domains=["corp.test"])

        assert generator.generate("x") == "x@corp.test"

    def test_date_range_edges(self, fixed_random):
        assert DateGenerator(fixed_random([0.0])).generate() == "1970-01-01"
        assert DateGenerator(fixed_random([0.999999])).generate() == "1999-12-28"

    def test_phone_range_edges(self, fixed_random):
        assert PhoneGenerator(fixed_random([0.0])).generate() == "+1 (200) 100-1000"
        assert PhoneGenerator(fixed_random([0.999999])).generate() == "+1 (999) 999-9999"

    def test_address_is_canned(self):
        first = AddressGenerator().generate()
        second = AddressGenerator().generate()

        assert first == second
        assert first.street == "123 Main St"
        assert first.city == "Springfield"
        assert first.state == "IL"
        assert first.country == "USA"
        assert first.zip_code == "62701"


class TestUserGenerator:
    """Test complete user generation"""

    def test_exact_user_for_zero_draws(self, zero_random):
        user = UserGenerator(zero_random).generate()

        assert user.id == "0"
        assert user.username == "jamessmith0"
        assert user.email == "jamessmith0@gmail.com"
        assert user.profile.first_name == "James"
        assert user.profile.last_name == "Smith"
        assert user.profile.date_of_birth == "1970-01-01"
        assert user.profile.phone == "+1 (200) 100-1000"
        assert user.profile.avatar_url == "https://avatars.dicebear.com/api/human/jamessmith0.svg"

    def test_exact_user_for_midpoint_draws(self, fixed_random):
        user = UserGenerator(fixed_random([0.5])).generate()

        assert user.id == "1388"
        assert user.username == "oliviabrown1388"
        assert user.email == "oliviabrown1388@outlook.com"
        assert user.profile.date_of_birth == "1985-07-15"
        assert user.profile.phone == "+1 (600) 550-5500"

    def test_draw_order(self, fixed_random):
        # first, last, id, suffix, domain, year, month, day, area, prefix, line
        draws = [0.2, 0.5, 0.0, 0.1, 0.8, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0]
        source = fixed_random(draws)

        user = UserGenerator(source).generate()

        assert source.calls == len(draws)
        assert user.profile.first_name == "John"
        assert user.profile.last_name == "Brown"
        assert user.id == "0"
        assert user.username == "johnbrown3e8"
        assert user.email == "johnbrown3e8@example.com"

    def test_derived_fields_are_consistent(self):
        generator = UserGenerator(random.Random(7))

        for _ in range(200):
            user = generator.generate()
            prefix = f"{user.profile.first_name}{user.profile.last_name}".lower()
            local, domain = user.email.split("@")

            assert user.username.startswith(prefix)
            assert re.fullmatch(r"[0-9a-f]+", user.username[len(prefix):])
            assert local == user.username
            assert domain in EmailGenerator.DOMAINS
            assert user.profile.avatar_url.endswith(f"/{user.username}.svg")

    def test_date_and_phone_patterns(self):
        generator = UserGenerator(random.Random(11))

        for _ in range(300):
            user = generator.generate()

            year, month, day = map(int, DATE_PATTERN.match(user.profile.date_of_birth).groups())
            assert 1970 <= year <= 1999
            assert 1 <= month <= 12
            assert 1 <= day <= 28

            area, prefix, line = map(int, PHONE_PATTERN.match(user.profile.phone).groups())
            assert 200 <= area <= 999
            assert 100 <= prefix <= 999
            assert 1000 <= line <= 9999


class TestMockDataGenerator:
    """Test the kind-dispatching generator"""

    def test_generates_user_case_insensitively(self, zero_random):
        generator = MockDataGenerator(rng=zero_random)

        assert isinstance(generator.generate("USER"), User)
        assert isinstance(generator.generate_user(), User)

    def test_unsupported_type(self):
        generator = MockDataGenerator()

        with pytest.raises(UnsupportedTypeError, match="Unsupported data type: vehicle"):
            generator.generate("vehicle")

    def test_empty_seed_defaults_to_timestamp(self):
        generator = MockDataGenerator()

        assert generator.seed.isdigit()
        assert generator.locale == "en-US"

    def test_seed_does_not_change_output(self, fixed_random):
        first = MockDataGenerator(seed="abc", rng=fixed_random([0.25])).generate("user")
        second = MockDataGenerator(seed="xyz", locale="fr-FR", rng=fixed_random([0.25])).generate("user")

        assert first == second

    def test_custom_registry(self, zero_random):
        class Widget:
            pass

        class WidgetGenerator(UserGenerator):
            def generate(self):
                return Widget()

        generator = MockDataGenerator(rng=zero_random, registry={"widget": WidgetGenerator})

        assert isinstance(generator.generate("widget"), Widget)
        with pytest.raises(UnsupportedTypeError):
            generator.generate("user")


class TestRegistry:
    """Test the module-level generator registry"""

    @pytest.fixture
    def restore_registry(self):
        saved = dict(GENERATOR_REGISTRY)
        yield
        GENERATOR_REGISTRY.clear()
        GENERATOR_REGISTRY.update(saved)

    def test_user_is_supported(self):
        assert is_supported("User")
        assert not is_supported("vehicle")
        assert supported_types() == ["user"]

    def test_register_generator(self, restore_registry, zero_random):
        register_generator("Member", UserGenerator)

        assert is_supported("member")
        assert isinstance(MockDataGenerator(rng=zero_random).generate("MEMBER"), User)
