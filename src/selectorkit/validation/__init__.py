"""Selector lint rules and runner."""

from selectorkit.validation.validator import LintError, lint, lint_or_raise

__all__ = ["LintError", "lint", "lint_or_raise"]
