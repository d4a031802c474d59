"""
================================================================================
Form Test Data
================================================================================

Test data generators and expected-value catalogs for the contact form.

Features:
- FormTestData record (all fields optional)
- Static data sets: valid, minimal, invalid, edge-case, internationalized
- Random valid data with reproducible seeds
- Validation / success message catalogs, field limits, timeouts
- E-mail and phone pattern lists for data-driven format tests

================================================================================
"""

import random
import string
import time
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional

from formsuites.ui_testing.framework.config_loader import Timeouts


# ================================================================================
# Data Models
# ================================================================================

class ContactMethod(str, Enum):
    """Preferred contact method radio values."""
    EMAIL = "email"
    PHONE = "phone"


@dataclass
class FormTestData:
    """
    Values for one form fill. Unset fields (None) are left untouched.

    Text fields: name, email, phone, message, company, role, country
    Flags: agree_to_terms, subscribe_newsletter
    Radio: contact_method
    """
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    country: Optional[str] = None
    agree_to_terms: Optional[bool] = None
    subscribe_newsletter: Optional[bool] = None
    contact_method: Optional[ContactMethod] = None

    TEXT_FIELDS = ("name", "email", "phone", "message", "company", "role", "country")

    def to_dict(self) -> Dict[str, Any]:
        """Set fields only; the contact method is reported by its value."""
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            data[f.name] = value.value if isinstance(value, ContactMethod) else value
        return data

    def text_values(self) -> Dict[str, str]:
        """Set text fields, keyed like FormActions.get_current_form_values()."""
        return {
            name: getattr(self, name)
            for name in self.TEXT_FIELDS
            if getattr(self, name) is not None
        }

    def with_overrides(self, **overrides: Any) -> "FormTestData":
        """Copy with some fields replaced."""
        return replace(self, **overrides)


# ================================================================================
# Catalogs
# ================================================================================

class FormTestConstants:
    """Expected values for the contact form (adjust to the target form)."""

    VALIDATION_MESSAGES: Dict[str, str] = {
        "REQUIRED_NAME": "Name is required",
        "REQUIRED_EMAIL": "Email is required",
        "REQUIRED_COUNTRY": "Country is required",
        "INVALID_EMAIL": "Please enter a valid email address",
        "REQUIRED_MESSAGE": "Message is required",
        "REQUIRED_AGREEMENT": "You must agree to the terms",
        "INVALID_PHONE": "Please enter a valid phone number",
    }

    SUCCESS_MESSAGES: Dict[str, str] = {
        "FORM_SUBMITTED": "Thank you for your message",
        "FORM_SENT": "Your message has been sent successfully",
        "CONFIRMATION": "We will get back to you soon",
    }

    FIELD_LIMITS: Dict[str, int] = {
        "NAME_MAX_LENGTH": 100,
        "EMAIL_MAX_LENGTH": 254,
        "PHONE_MAX_LENGTH": 20,
        "MESSAGE_MAX_LENGTH": 1000,
        "COMPANY_MAX_LENGTH": 100,
    }

    TIMEOUTS = Timeouts()

    AVAILABLE_ROLES: List[str] = [
        "developer",
        "manager",
        "consultant",
        "analyst",
        "designer",
        "other",
    ]

    COUNTRIES: List[str] = [
        "Algeria",
        "Australia",
        "Canada",
        "France",
        "Germany",
        "Ireland",
        "Japan",
        "Spain",
        "United Kingdom",
        "United States",
    ]

    CONTACT_METHODS = tuple(method.value for method in ContactMethod)


class EmailTestPatterns:
    """E-mail addresses for format validation tests."""

    VALID_EMAILS: List[str] = [
        "test@example.com",
        "user.name@domain.co.uk",
        "test+tag@example.org",
        "user123@test-domain.com",
        "válid@ünicode.com",
    ]

    INVALID_EMAILS: List[str] = [
        "invalid-email",
        "@domain.com",
        "user@",
        "user..name@domain.com",
        "user@domain",
        "user name@domain.com",
        "",
    ]


class PhoneTestPatterns:
    """Phone numbers for format validation tests."""

    VALID_PHONES: List[str] = [
        "+44 20 7946 0958",
        "020 7946 0958",
        "+1 (555) 123-4567",
        "+33 1 42 68 53 00",
        "07123 456789",
    ]

    INVALID_PHONES: List[str] = [
        "abc123",
        "123",
        "phone-number",
        "++44 20 7946 0958",
        "",
    ]


# ================================================================================
# Generators
# ================================================================================

class FormDataFactory:
    """
    Factory for contact form data.

    Static data sets are fixed literals; `random_valid()` draws from
    sample pools and is reproducible when a seed is given.

    Usage:
        factory = FormDataFactory(seed=42)
        data = factory.valid()
        broken = factory.invalid_email()
        anyone = factory.random_valid()
    """

    PHONE = "+44 20 7946 0958"

    RANDOM_NAMES = ["Alice Johnson", "Bob Wilson", "Carol Davis", "David Brown", "Emma Wilson"]
    RANDOM_COMPANIES = [
        "Tech Solutions",
        "Digital Innovations",
        "Creative Agency",
        "Consulting Group",
        "Development House",
    ]
    RANDOM_ROLES = ["developer", "manager", "consultant", "analyst", "designer"]
    RANDOM_MESSAGES = [
        "I would like to inquire about your services.",
        "Please contact me regarding your products.",
        "I am interested in a partnership opportunity.",
        "Could you provide more information about pricing?",
        "I need assistance with technical implementation.",
    ]

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Random seed for reproducible random data
        """
        self._rng = random.Random(seed)
        self._sequence = 0

    def _random_string(self, length: int = 8) -> str:
        chars = string.ascii_lowercase + string.digits
        return "".join(self._rng.choice(chars) for _ in range(length))

    def _unique_email(self) -> str:
        self._sequence += 1
        millis = int(time.time() * 1000)
        return f"test{millis}{self._sequence}{self._random_string(4)}@example.com"

    # -------------------------------------------------------------------------
    # Static data sets
    # -------------------------------------------------------------------------

    def valid(self) -> FormTestData:
        """Complete, valid form data."""
        return FormTestData(
            name="John Doe",
            email="john.doe@example.com",
            phone=self.PHONE,
            message="This is a test message for the contact form validation.",
            company="Test Company Ltd",
            role="developer",
            country="United Kingdom",
            agree_to_terms=True,
            subscribe_newsletter=False,
            contact_method=ContactMethod.EMAIL,
        )

    def minimal(self) -> FormTestData:
        """A small but realistic submission."""
        return FormTestData(
            name="Jane Smith",
            email="jane.smith@test.com",
            message="Minimal test message",
            country="United Kingdom",
            agree_to_terms=True,
        )

    def required_only(self) -> FormTestData:
        """Only the fields the form requires (name, country)."""
        return FormTestData(name="John Smith", email="", country="Algeria")

    def invalid_email(self) -> FormTestData:
        return self.valid().with_overrides(email="invalid-email-format")

    def invalid_phone(self) -> FormTestData:
        return self.valid().with_overrides(phone="abc123")

    def without_agreement(self) -> FormTestData:
        return self.valid().with_overrides(agree_to_terms=False)

    def long_text(self) -> FormTestData:
        """Name, message and company filled exactly to their FIELD_LIMITS."""
        limits = FormTestConstants.FIELD_LIMITS
        return FormTestData(
            name="A" * limits["NAME_MAX_LENGTH"],
            email="test@example.com",
            phone=self.PHONE,
            message=("Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 20)[:limits["MESSAGE_MAX_LENGTH"]],
            company=("Very Long Company Name That Exceeds Normal Length " * 3)[:limits["COMPANY_MAX_LENGTH"]],
            role="manager",
            country="Canada",
            agree_to_terms=True,
            subscribe_newsletter=True,
            contact_method=ContactMethod.PHONE,
        )

    def empty(self) -> FormTestData:
        return FormTestData(
            name="",
            email="",
            phone="",
            message="",
            company="",
            agree_to_terms=False,
            subscribe_newsletter=False,
        )

    def special_characters(self) -> FormTestData:
        return FormTestData(
            name="José María O'Connor-Smith",
            email="test+special@example-domain.co.uk",
            phone="+44 (0) 20-7946-0958",
            message="Testing special characters: áéíóú, ñ, ç, ü, @#$%^&*()",
            company="Müller & Associates Ltd.",
            role="consultant",
            country="Spain",
            agree_to_terms=True,
            subscribe_newsletter=True,
            contact_method=ContactMethod.EMAIL,
        )

    def international(self) -> FormTestData:
        """Non-Latin scripts in every free-text field."""
        return FormTestData(
            name="Σωκράτης Παπαδόπουλος",
            email="sokratis@example.gr",
            phone="+30 21 0123 4567",
            message="Γεια σας! こんにちは! Здравствуйте! مرحبا! 你好!",
            company="株式会社テスト",
            role="analyst",
            country="Japan",
            agree_to_terms=True,
            subscribe_newsletter=False,
            contact_method=ContactMethod.PHONE,
        )

    # -------------------------------------------------------------------------
    # Random data
    # -------------------------------------------------------------------------

    def random_valid(self) -> FormTestData:
        """Random valid data; the e-mail is unique per call."""
        index = self._rng.randrange(len(self.RANDOM_NAMES))
        return FormTestData(
            name=self.RANDOM_NAMES[index],
            email=self._unique_email(),
            phone=self.PHONE,
            message=self.RANDOM_MESSAGES[index],
            company=self.RANDOM_COMPANIES[index],
            role=self.RANDOM_ROLES[index],
            country=self._rng.choice(FormTestConstants.COUNTRIES),
            agree_to_terms=True,
            subscribe_newsletter=self._rng.random() > 0.5,
            contact_method=self._rng.choice(list(ContactMethod)),
        )


# ================================================================================
# Convenience Functions
# ================================================================================

def create_valid_form_data(**overrides: Any) -> FormTestData:
    """Quick helper: valid data with optional overrides."""
    return FormDataFactory().valid().with_overrides(**overrides)
