"""
Fragment Guardrails - Enforce safety rules on compiled predicate fragments
"""

from typing import Iterable, List, Tuple

from compiler.requests import CompiledFragment


class FragmentGuardrailError(Exception):
    """Raised when a compiled fragment violates guardrails"""
    pass


class FragmentGuardrails:
    """Enforces safety guardrails on compiled fragments"""

    # Never emitted by the compiler; values are always bound
    BLOCKED_TOKENS = {
        ';': 'statement terminator',
        '--': 'line comment',
        '/*': 'block comment',
        "'": 'string literal',
    }

    # Untrusted text containing one of these must never reach the SQL text
    SQL_METACHARACTERS = ("'", ';', '--', '/*', '*/')

    def __init__(self, strict_mode: bool = True):
        """
        Initialize guardrails

        Args:
            strict_mode: If True, raise on violations. If False, just return violations.
        """
        self.strict_mode = strict_mode

    def validate_fragment(self,
                          fragment: CompiledFragment,
                          untrusted: Iterable[str] = ()) -> Tuple[bool, List[str]]:
        """
        Validate fragment against guardrails

        Args:
            fragment: Compiled fragment
            untrusted: User-supplied text that must only appear in bindings

        Returns:
            Tuple of (is_valid, list_of_violations)
        """
        violations = []

        placeholders = fragment.placeholder_count
        if placeholders != len(fragment.bindings):
            violations.append(
                f"Placeholder/binding mismatch: {placeholders} placeholder(s), "
                f"{len(fragment.bindings)} binding(s)"
            )

        for token, description in self.BLOCKED_TOKENS.items():
            if token in fragment.sql:
                violations.append(f"Blocked token detected: {token!r} ({description})")

        for text in untrusted:
            if not isinstance(text, str) or not text:
                continue
            if any(meta in text for meta in self.SQL_METACHARACTERS) and text in fragment.sql:
                violations.append("Untrusted input found verbatim in SQL text")

        is_valid = len(violations) == 0
        return (is_valid, violations)

    def validate_and_raise(self, fragment: CompiledFragment, untrusted: Iterable[str] = ()):
        """
        Validate fragment and raise if violations found

        Args:
            fragment: Compiled fragment
            untrusted: User-supplied text that must only appear in bindings

        Raises:
            FragmentGuardrailError: If violations found (strict mode only)
        """
        is_valid, violations = self.validate_fragment(fragment, untrusted)

        if not is_valid and self.strict_mode:
            raise FragmentGuardrailError(
                "Fragment guardrail violations:\n" + "\n".join(f"  - {v}" for v in violations)
            )
        return violations
