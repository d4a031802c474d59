"""
================================================================================
Page Objects
================================================================================

Page Object Model implementation for the contact form.

    - form_locators: Selector registry (primary + fallback selectors)
    - form_page: Navigation and load handling
    - form_actions: Fill / select / submit actions and verifications

Author: Automation Team
License: MIT
================================================================================
"""

from .form_locators import FormLocators
from .form_page import FormPage
from .form_actions import FormActionError, FormActions

__all__ = [
    "FormActionError",
    "FormActions",
    "FormLocators",
    "FormPage",
]
