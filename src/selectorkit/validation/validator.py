"""Run lint rules over a selector tree."""

from __future__ import annotations

import logging
from typing import Callable

from selectorkit.errors import SelectorError
from selectorkit.model.diagnostic import Diagnostic
from selectorkit.model.selector import SelectorNode
from selectorkit.validation.rules import ALL_RULES

logger = logging.getLogger(__name__)

RuleFunc = Callable[[SelectorNode], list[Diagnostic]]


class LintError(SelectorError):
    """A selector produced at least one ERROR diagnostic."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        problems = "; ".join(str(d) for d in diagnostics if d.is_error)
        super().__init__(f"Selector has {len(diagnostics)} lint error(s): {problems}")


def lint(
    node: SelectorNode, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Return every diagnostic the built-in rules (and *extra_rules*) report."""
    diagnostics: list[Diagnostic] = []
    for rule in [*ALL_RULES, *(extra_rules or ())]:
        found = rule(node)
        if found:
            logger.debug("%s reported %d diagnostic(s)", rule.__name__, len(found))
        diagnostics.extend(found)
    return diagnostics


def lint_or_raise(
    node: SelectorNode, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Like :func:`lint`, but raise :class:`LintError` on any ERROR.

    Warnings and info are returned when the selector has no errors.
    """
    diagnostics = lint(node, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise LintError(errors)
    return diagnostics
