"""UI test suite for the contact form (Playwright, async)."""
