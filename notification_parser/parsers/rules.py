"""Ordered first-match-wins rule chains.

Every extraction pass (amount, direction, category, merchant) is an explicit
ordered list of named rules. A rule's matcher returns a result or None; the
chain returns the first non-None result, so rule order is visible as data and
each rule can be exercised on its own.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Rule(Generic[T]):
    """
    A named matcher.

    Attributes:
        name: Stable rule identifier (used in traces and tests)
        matcher: Callable returning a result for matching text, else None
    """
    name: str
    matcher: Callable[[str], Optional[T]]

    def apply(self, text: str) -> Optional[T]:
        return self.matcher(text)


@dataclass(frozen=True)
class RuleMatch(Generic[T]):
    """Result of a chain evaluation: the winning rule and its value."""
    rule: str
    value: T


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Case-sensitive substring test; callers pass lowercased text."""
    return any(keyword in text for keyword in keywords)


def keyword_rule(name: str, keywords: Sequence[str], result: T) -> Rule[T]:
    """
    Build a rule yielding ``result`` when any keyword is a substring of the text.

    Keywords are lowercased once here; the chain is evaluated on lowercased text.
    """
    frozen = tuple(k.lower() for k in keywords)

    def matcher(text: str) -> Optional[T]:
        return result if contains_any(text, frozen) else None

    return Rule(name, matcher)


class RuleChain(Generic[T]):
    """Evaluates rules in order, first match wins."""

    def __init__(self, rules: Iterable[Rule[T]]):
        self.rules: Tuple[Rule[T], ...] = tuple(rules)

    def evaluate(
        self,
        text: str,
        accept: Optional[Callable[[T], bool]] = None
    ) -> Optional[RuleMatch[T]]:
        """
        Return the first rule match, skipping results rejected by ``accept``.

        Args:
            text: Text to evaluate
            accept: Optional filter; rejected results continue to the next rule

        Returns:
            RuleMatch or None if no rule matched
        """
        for rule in self.rules:
            value = rule.apply(text)
            if value is None:
                continue
            if accept is not None and not accept(value):
                continue
            return RuleMatch(rule.name, value)
        return None

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self.rules)

    def __len__(self) -> int:
        return len(self.rules)
