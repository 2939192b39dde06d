"""
Filter Schema - Validates filter definitions against JSON schema and builds requests
"""

import json
from typing import Any, Dict, List, Tuple

import yaml
from jsonschema import Draft7Validator

from compiler.requests import JsonAnyRequest, LikeRequest


class FilterValidationError(Exception):
    """Exception raised for filter definition validation failures"""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Filter validation failed with {len(errors)} error(s): {'; '.join(errors)}")


_COLUMN = {
    'type': 'string',
    'pattern': r'^[A-Za-z_][A-Za-z0-9_$]*(\.[A-Za-z_][A-Za-z0-9_$]*)*$',
}

_SCALAR = {'type': ['string', 'number', 'boolean', 'null']}

FILTER_SCHEMA: Dict[str, Any] = {
    '$schema': 'http://json-schema.org/draft-07/schema#',
    'title': 'Predicate filter definitions',
    'type': 'object',
    'required': ['filters'],
    'additionalProperties': False,
    'properties': {
        'filters': {
            'type': 'array',
            'items': {
                'oneOf': [
                    {
                        'type': 'object',
                        'required': ['type', 'column', 'pattern'],
                        'additionalProperties': False,
                        'properties': {
                            'type': {'const': 'LIKE'},
                            'column': _COLUMN,
                            'pattern': {'type': 'string'},
                            'case_sensitive': {'type': 'boolean'},
                            'escape_wildcards': {'type': 'boolean'},
                            'disjunctive': {'type': 'boolean'},
                        },
                    },
                    {
                        'type': 'object',
                        'required': ['type', 'column', 'values'],
                        'additionalProperties': False,
                        'properties': {
                            'type': {'const': 'JSON_CONTAINS_ANY'},
                            'column': _COLUMN,
                            'values': {'type': 'array', 'items': _SCALAR},
                            'disjunctive': {'type': 'boolean'},
                        },
                    },
                ],
            },
        },
    },
}


class FilterValidator:
    """Validates filter definition documents"""

    def __init__(self, schema: Dict[str, Any] = None):
        """
        Initialize validator

        Args:
            schema: JSON schema (defaults to FILTER_SCHEMA)
        """
        self.schema = schema or FILTER_SCHEMA
        self.validator = Draft7Validator(self.schema)

    def validate_filters(self, document: Any) -> Tuple[bool, List[str]]:
        """
        Validate a filter document

        Args:
            document: Parsed JSON/YAML document

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        for error in sorted(self.validator.iter_errors(document), key=lambda e: [str(p) for p in e.absolute_path]):
            # Include the path to the error
            path = '.'.join(str(p) for p in error.absolute_path) if error.absolute_path else 'root'
            errors.append(f"Schema validation error at {path}: {error.message}")

        return len(errors) == 0, errors

    def validate_and_raise(self, document: Any) -> None:
        """
        Validate filter document and raise exception if invalid

        Raises:
            FilterValidationError: If document is invalid
        """
        is_valid, errors = self.validate_filters(document)
        if not is_valid:
            raise FilterValidationError(errors)


def build_requests(document: Dict[str, Any]) -> List[Tuple[str, Any]]:
    """
    Convert a validated filter document into predicate requests

    Args:
        document: Filter document that passed FilterValidator

    Returns:
        List of (kind, request) pairs in document order
    """
    requests = []
    for definition in document.get('filters', []):
        kind = definition['type']
        if kind == 'LIKE':
            request = LikeRequest(
                column=definition['column'],
                pattern=definition['pattern'],
                case_sensitive=definition.get('case_sensitive', False),
                escape_wildcards=definition.get('escape_wildcards', False),
                disjunctive=definition.get('disjunctive', False),
            )
        else:
            request = JsonAnyRequest(
                column=definition['column'],
                values=definition.get('values', []),
                disjunctive=definition.get('disjunctive', False),
            )
        requests.append((kind, request))
    return requests


def load_filters(path: str) -> List[Tuple[str, Any]]:
    """
    Load filter definitions from a YAML/JSON file and validate them

    Args:
        path: Path to filter file

    Returns:
        List of (kind, request) pairs

    Raises:
        FilterValidationError: If the document is invalid
    """
    with open(path, 'r', encoding='utf-8') as f:
        if str(path).endswith('.json'):
            document = json.load(f)
        else:
            document = yaml.safe_load(f)

    FilterValidator().validate_and_raise(document)
    return build_requests(document)


__all__ = [
    'FILTER_SCHEMA',
    'FilterValidator',
    'FilterValidationError',
    'build_requests',
    'load_filters',
]
