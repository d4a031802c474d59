"""
================================================================================
Smart Locator with Fallback Selector Lists
================================================================================

Every form element is described by an ordered list of selectors: the
selector for the bundled demo form first, then alternatives seen on other
variants of the form (name attributes, placeholders, type selectors).

resolve() records which entry matched, so a run against a redesigned form
ends with a list of primary selectors that need updating.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from loguru import logger
from playwright.async_api import Locator, Page


class ElementNotFoundError(Exception):
    """Raised when no locator definition exists for an element."""
    pass


@dataclass
class LocatorHealth:
    """One resolve() outcome: which selector of the list actually matched."""
    element_name: str
    primary_selector: str
    used_fallback: bool = False
    fallback_name: Optional[str] = None
    fallback_selector: Optional[str] = None


class SmartLocator:
    """
    Element locator registry with fallback strategies.

    Each element name maps to an ordered list of selectors. The first entry
    is the primary selector, the rest are fallbacks for form implementations
    that name their fields differently.

    Two ways to turn a definition into a Playwright Locator:
        - `union(name)`: all selectors joined into one CSS union. Nothing is
          queried until the locator is used, so it always reflects the
          current DOM.
        - `await resolve(name)`: walks the list in priority order and returns
          the first selector that currently matches. Fallback usage is
          recorded and logged.

    Usage:
        >>> smart = SmartLocator(page, {"email_input": ["#email", "input[type='email']"]})
        >>> await expect(smart.union("email_input").first).to_be_visible()
        >>> field = await smart.resolve("email_input")
    """

    # element_name -> [primary, fallback_1, fallback_2, ...]
    LOCATORS: Dict[str, List[str]] = {}

    def __init__(
        self,
        page: Page,
        locators: Optional[Dict[str, List[str]]] = None,
    ):
        """
        Args:
            page: Page the selectors are evaluated on
            locators: Extra or overriding definitions on top of LOCATORS
        """
        self.page = page
        self._locators: Dict[str, List[str]] = {
            name: list(selectors) for name, selectors in self.LOCATORS.items()
        }
        for name, selectors in (locators or {}).items():
            self._locators[name] = list(selectors)
        self._health_records: List[LocatorHealth] = []
        self._fallback_used: Dict[str, LocatorHealth] = {}

    # =========================================================================
    # Definitions
    # =========================================================================

    def selectors(self, element_name: str) -> List[str]:
        """
        Return the ordered selector list for an element.

        Raises:
            ElementNotFoundError: When the element has no definition
        """
        selectors = self._locators.get(element_name)
        if not selectors:
            raise ElementNotFoundError(
                f"No locators defined for element: {element_name}"
            )
        return list(selectors)

    def strategies(self, element_name: str) -> Dict[str, str]:
        """Return the selector list keyed as primary / fallback_1 / fallback_2 ..."""
        selectors = self.selectors(element_name)
        strategies = {"primary": selectors[0]}
        for i, selector in enumerate(selectors[1:], start=1):
            strategies[f"fallback_{i}"] = selector
        return strategies

    def register_locator(self, element_name: str, selectors: List[str]) -> None:
        """
        Register or replace a locator definition at runtime.

        Args:
            element_name: Unique name for the element
            selectors: Ordered selectors, primary first
        """
        if not selectors:
            raise ValueError(f"At least one selector is required for {element_name}")
        self._locators[element_name] = list(selectors)
        logger.debug(f"Registered locator: {element_name} ({len(selectors)} selectors)")

    @property
    def element_names(self) -> List[str]:
        return list(self._locators)

    # =========================================================================
    # Locator Construction
    # =========================================================================

    def union(self, element_name: str) -> Locator:
        """
        Build a lazy locator matching any of the element's selectors.

        Args:
            element_name: Registered element name

        Returns:
            Playwright Locator for the comma-joined selector list
        """
        return self.page.locator(", ".join(self.selectors(element_name)))

    async def resolve(self, element_name: str) -> Locator:
        """
        Locator for the first selector in the list that currently matches.

        Tries each selector in order and returns the first one that matches
        at least one element right now. When nothing matches yet, the union
        locator is returned so the caller's visibility assertion waits and
        fails with Playwright's own timeout error.

        Args:
            element_name: Registered element name

        Returns:
            Playwright Locator (first match) for the element
        """
        strategies = self.strategies(element_name)
        primary = strategies["primary"]

        for strategy_name, selector in strategies.items():
            locator = self.page.locator(selector)
            if await locator.count() == 0:
                continue

            health = LocatorHealth(
                element_name=element_name,
                primary_selector=primary,
                used_fallback=(strategy_name != "primary"),
                fallback_name=strategy_name if strategy_name != "primary" else None,
                fallback_selector=selector if strategy_name != "primary" else None,
            )
            self._health_records.append(health)

            if health.used_fallback:
                logger.warning(
                    f"⚠️ Element '{element_name}' used fallback: "
                    f"{strategy_name} -> {selector}"
                )
                self._fallback_used[element_name] = health
            else:
                logger.debug(f"✅ Element '{element_name}' found: {selector}")

            return locator.first

        logger.debug(f"No selector for '{element_name}' matches yet, using union locator")
        return self.union(element_name).first

    async def has(self, element_name: str) -> bool:
        """Return True if any selector for the element currently matches."""
        return await self.union(element_name).count() > 0

    # =========================================================================
    # Health
    # =========================================================================

    @property
    def health_records(self) -> List[LocatorHealth]:
        return list(self._health_records)

    def get_health_report(self) -> str:
        """Text listing every element that resolve() found through a fallback."""
        if not self._fallback_used:
            return "✅ All elements used primary locators. No maintenance needed."

        report_lines = [
            "⚠️ Fallback selectors were needed for these form elements;",
            "their primary selector no longer matches the page:",
            "",
        ]

        for element_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{element_name}]",
                f"    primary (no match): {health.primary_selector}",
                f"    Used: {health.fallback_name} -> {health.fallback_selector}",
                "",
            ])

        return "\n".join(report_lines)


__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "LocatorHealth",
]
