from .form_test_data import (
    ContactMethod,
    EmailTestPatterns,
    FormDataFactory,
    FormTestConstants,
    FormTestData,
    PhoneTestPatterns,
    create_valid_form_data,
)

__all__ = [
    "ContactMethod",
    "EmailTestPatterns",
    "FormDataFactory",
    "FormTestConstants",
    "FormTestData",
    "PhoneTestPatterns",
    "create_valid_form_data",
]
