"""
pathglob Core: Pattern validators.

Validation is advisory: ``validate_pattern`` reports which named rules a
pattern violates and never rewrites or refuses the pattern. Callers that want
to reject bad patterns use ``check_patterns``, which raises.

Rules are a plain mapping of name to predicate. A predicate returns True when
the pattern *violates* the rule. Pass a different mapping to add, remove or
override rules; an empty mapping disables validation entirely.

Example:
    >>> validate_pattern("**/*.js")
    ['no_leading_globstar']
    >>> validate_pattern("**/*.js", rules={})
    []
"""
import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Pattern, Union

from pathglob.core.constants import (
    CURRENT_DIR_PREFIX,
    GLOBSTAR,
    NEGATION_MARKER,
    PARENT_DIR_PREFIX,
    DefaultRule,
    ErrorCode,
)

RulePredicate = Callable[[str], bool]
RuleSet = Mapping[str, RulePredicate]


class ValidationError(Exception):
    """Base exception for validation errors."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        """Initialize ValidationError.

        Args:
            message: Error message
            error_code: Associated error code
        """
        super().__init__(message)
        self.error_code = error_code


class InvalidPatternError(ValidationError):
    """Raised when one or more patterns violate validation rules."""

    def __init__(self, violations: Dict[str, List[str]]):
        """Initialize InvalidPatternError.

        Args:
            violations: Mapping of offending pattern to violated rule names
        """
        details = "; ".join(
            f"{pattern!r}: {', '.join(names)}" for pattern, names in violations.items()
        )
        super().__init__(f"Invalid pattern(s): {details}")
        self.violations = violations


@dataclass(frozen=True)
class ValidationRule:
    """A validation predicate with a human-readable message."""

    message: str
    test: RulePredicate

    def __call__(self, pattern: str) -> bool:
        return bool(self.test(pattern))

    @classmethod
    def from_regex(cls, message: str, regex: Union[str, Pattern[str]]) -> "ValidationRule":
        """Build a rule that is violated when ``regex`` is found in the pattern.

        Args:
            message: Description of the violation
            regex: Regular expression (string or compiled)

        Returns:
            ValidationRule instance

        Raises:
            ValidationError: If the regular expression does not compile
        """
        try:
            compiled = re.compile(regex) if isinstance(regex, str) else regex
        except re.error as e:
            raise ValidationError(f"Failed to compile rule regex {regex!r}: {e}")
        return cls(message=message, test=lambda pattern: compiled.search(pattern) is not None)


def _strip_negation(pattern: str) -> str:
    if pattern.startswith(NEGATION_MARKER):
        return pattern[len(NEGATION_MARKER) :]
    return pattern


def _has_leading_globstar(pattern: str) -> bool:
    body = _strip_negation(pattern)
    if body.startswith(CURRENT_DIR_PREFIX):
        body = body[len(CURRENT_DIR_PREFIX) :]
    return body.startswith(GLOBSTAR)


def _has_parent_traversal(pattern: str) -> bool:
    return _strip_negation(pattern).startswith(PARENT_DIR_PREFIX)


def _contains_any(characters: str) -> RulePredicate:
    return lambda pattern: any(c in pattern for c in characters)


DEFAULT_RULES: Dict[str, ValidationRule] = {
    DefaultRule.NO_LEADING_GLOBSTAR: ValidationRule(
        message="begins with an unanchored '**' that matches everything",
        test=_has_leading_globstar,
    ),
    DefaultRule.NO_PARENT_TRAVERSAL: ValidationRule(
        message="begins with '../' and reaches outside the root",
        test=_has_parent_traversal,
    ),
    DefaultRule.NO_REGEX_METACHARS: ValidationRule(
        message="contains regex grouping or alternation characters",
        test=_contains_any("()|"),
    ),
    DefaultRule.NO_BRACE_EXPANSION: ValidationRule(
        message="contains brace expansion, which is not supported",
        test=_contains_any("{}"),
    ),
    DefaultRule.NO_CHARACTER_CLASSES: ValidationRule(
        message="contains a character class, which is not supported",
        test=_contains_any("[]"),
    ),
}


def validate_pattern(pattern: str, rules: Optional[RuleSet] = None) -> List[str]:
    """Report which rules a pattern violates.

    Args:
        pattern: Raw pattern, possibly negated
        rules: Mapping of rule name to predicate (defaults to DEFAULT_RULES)

    Returns:
        Names of violated rules, in mapping order (empty if valid)
    """
    if rules is None:
        rules = DEFAULT_RULES

    return [name for name, predicate in rules.items() if predicate(pattern)]


def describe_violations(violations: Iterable[str], rules: Optional[RuleSet] = None) -> List[str]:
    """Turn violated rule names into readable messages.

    Rules without a message (plain callables) are described by name.

    Args:
        violations: Rule names as returned by validate_pattern
        rules: Rule mapping the names came from

    Returns:
        One message per violation
    """
    if rules is None:
        rules = DEFAULT_RULES

    messages = []
    for name in violations:
        message = getattr(rules.get(name), "message", None)
        messages.append(f"{name}: {message}" if message else name)
    return messages


def collect_violations(
    patterns: Iterable[str], rules: Optional[RuleSet] = None
) -> Dict[str, List[str]]:
    """Validate several patterns at once.

    Args:
        patterns: Raw patterns
        rules: Mapping of rule name to predicate (defaults to DEFAULT_RULES)

    Returns:
        Mapping of pattern to violated rule names, for invalid patterns only
    """
    invalid = {}
    for pattern in patterns:
        violations = validate_pattern(pattern, rules)
        if violations:
            invalid[pattern] = violations
    return invalid


def check_patterns(patterns: Iterable[str], rules: Optional[RuleSet] = None) -> None:
    """Validate patterns and reject the list if any of them is invalid.

    Args:
        patterns: Raw patterns
        rules: Mapping of rule name to predicate (defaults to DEFAULT_RULES)

    Raises:
        InvalidPatternError: If any pattern violates a rule
    """
    invalid = collect_violations(patterns, rules)
    if invalid:
        raise InvalidPatternError(invalid)
