import copy
import json
import math
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Sequence, Union

from directus_commons.constants.app_message import AppMessage
from directus_commons.constants.filter_operator import FilterOperator
from directus_commons.utils.errors import InvalidArgumentError

"""
================================================================================
Filter Expression – Usage Guide
================================================================================
Builds the nested filter tree sent in the `filter=` query parameter.

    expr = FilterExpression().equals("status", "published").greater_than("views", 100)
    expr.get()
    # {"status":{"_eq":"published"},"views":{"_gt":100}}

    drafts = FilterExpression().equals("status", "draft")
    mine = FilterExpression().equals("owner", "$CURRENT_USER")
    FilterExpression().or_(drafts).or_(mine).get()
    # {"_or":[{"status":{"_eq":"draft"}},{"owner":{"_eq":"$CURRENT_USER"}}]}

Rules:
    - One clause per field: calling an operator twice on the same field
      replaces the earlier clause.
    - `_and` / `_or` keep growing: each call appends another clause map.
    - `_empty` / `_nempty` map the field straight to the operator name,
      with no nested value.
    - `output` is refreshed after every call, so it can be logged mid-chain.
================================================================================
"""

Scalar = Union[str, int, float, bool, date, datetime]
ClauseMap = Dict[str, Any]


class FilterExpression:
    """
    Fluent builder for one filter tree, serialized as compact JSON.
    """

    def __init__(self):
        self.clauses: ClauseMap = {}
        self.output: str = self._render(self.clauses)

    @classmethod
    def from_clauses(cls, clauses: Mapping[str, Any]) -> 'FilterExpression':
        """
        Rebuild an expression from an already parsed clause map, e.g. one read
        back from a saved preset.
        """
        if not isinstance(clauses, Mapping):
            raise TypeError(f"Clause map must be a mapping, got {type(clauses).__name__}")
        expr = cls()
        return expr._commit(cls._normalize(clauses))

    # -------------------------
    # rendering
    # -------------------------
    @staticmethod
    def _render(clauses: ClauseMap) -> str:
        return json.dumps(clauses, separators=(",", ":"), ensure_ascii=False, allow_nan=False)

    def _commit(self, candidate: ClauseMap) -> 'FilterExpression':
        # render before assigning so a failed call leaves clauses and output untouched
        output = self._render(candidate)
        self.clauses = candidate
        self.output = output
        return self

    def get(self) -> str:
        return self.output

    def __str__(self) -> str:
        return self.output

    def __repr__(self) -> str:
        return f"FilterExpression({self.output})"

    # -------------------------
    # validation
    # -------------------------
    @staticmethod
    def _check_field(field: str) -> str:
        if not isinstance(field, str) or not field.strip():
            raise InvalidArgumentError(AppMessage.FIELD_REQUIRED)
        if field in (FilterOperator.AND.value, FilterOperator.OR.value):
            raise InvalidArgumentError(f"'{field}' is reserved, use and_() / or_() instead")
        return field

    @staticmethod
    def _scalar(value: Any, op: FilterOperator) -> Any:
        # bool is an int subclass, both are fine
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidArgumentError(f"Operator '{op.value}' does not accept non-finite number {value!r}")
        if isinstance(value, (str, int, float)):
            return value
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        raise TypeError(f"Operator '{op.value}' does not accept a value of type {type(value).__name__}")

    @classmethod
    def _normalize(cls, node: Any) -> Any:
        """Copy a raw clause tree, checking every leaf the way operator calls do."""
        if isinstance(node, Mapping):
            normalized = {}
            for key, value in node.items():
                if not isinstance(key, str):
                    raise TypeError(f"Clause keys must be strings, got {type(key).__name__}")
                normalized[key] = cls._normalize(value)
            return normalized
        if isinstance(node, (list, tuple)):
            return [cls._normalize(v) for v in node]
        if node is None:
            return None
        if isinstance(node, float) and not math.isfinite(node):
            raise InvalidArgumentError(f"Clause value {node!r} is not a finite number")
        if isinstance(node, (str, int, float)):
            return node
        if isinstance(node, (date, datetime)):
            return node.isoformat()
        raise TypeError(f"Clause value of type {type(node).__name__} cannot be sent in a filter")

    @staticmethod
    def _text(value: Any, op: FilterOperator) -> str:
        if not isinstance(value, str):
            raise TypeError(f"Operator '{op.value}' expects a string, got {type(value).__name__}")
        return value

    def _values(self, values: Any, op: FilterOperator) -> List[Any]:
        # sets are not Sequences, so their unstable order never reaches the output
        if isinstance(values, (str, bytes, Mapping)) or not isinstance(values, Sequence):
            raise TypeError(f"Operator '{op.value}' requires a list of values")
        return [self._scalar(v, op) for v in values]

    def _range(self, bounds: Any, op: FilterOperator) -> List[Any]:
        if isinstance(bounds, (str, bytes, Mapping)) or not isinstance(bounds, Sequence):
            raise TypeError(f"Operator '{op.value}' requires a (low, high) pair")
        if len(bounds) != 2:
            raise InvalidArgumentError(f"Operator '{op.value}' requires exactly two bounds, got {len(bounds)}")
        return [self._scalar(bounds[0], op), self._scalar(bounds[1], op)]

    # -------------------------
    # clause storage
    # -------------------------
    def _set(self, field: str, op: FilterOperator, value: Any) -> 'FilterExpression':
        candidate = dict(self.clauses)
        candidate[self._check_field(field)] = {op.value: value}
        return self._commit(candidate)

    def _set_bare(self, field: str, op: FilterOperator) -> 'FilterExpression':
        candidate = dict(self.clauses)
        candidate[self._check_field(field)] = op.value
        return self._commit(candidate)

    def _append(self, op: FilterOperator, others: Sequence[Any]) -> 'FilterExpression':
        if not others:
            return self
        nested: List[ClauseMap] = []
        for other in others:
            if other is self:
                raise InvalidArgumentError("A filter expression cannot be nested inside itself")
            if isinstance(other, FilterExpression):
                nested.append(copy.deepcopy(other.clauses))
            elif isinstance(other, Mapping):
                nested.append(self._normalize(other))
            else:
                raise TypeError(f"Operator '{op.value}' expects FilterExpression or mapping, got {type(other).__name__}")
        candidate = dict(self.clauses)
        candidate[op.value] = list(candidate.get(op.value, [])) + nested
        return self._commit(candidate)

    # -------------------------
    # comparison
    # -------------------------
    def equals(self, field: str, value: Scalar) -> 'FilterExpression':
        return self._set(field, FilterOperator.EQUALS, self._scalar(value, FilterOperator.EQUALS))

    def not_equals(self, field: str, value: Scalar) -> 'FilterExpression':
        return self._set(field, FilterOperator.NOT_EQUALS, self._scalar(value, FilterOperator.NOT_EQUALS))

    def less_than(self, field: str, value: Scalar) -> 'FilterExpression':
        return self._set(field, FilterOperator.LESS_THAN, self._scalar(value, FilterOperator.LESS_THAN))

    def less_or_equal(self, field: str, value: Scalar) -> 'FilterExpression':
        return self._set(field, FilterOperator.LESS_OR_EQUAL, self._scalar(value, FilterOperator.LESS_OR_EQUAL))

    def greater_than(self, field: str, value: Scalar) -> 'FilterExpression':
        return self._set(field, FilterOperator.GREATER_THAN, self._scalar(value, FilterOperator.GREATER_THAN))

    def greater_or_equal(self, field: str, value: Scalar) -> 'FilterExpression':
        return self._set(field, FilterOperator.GREATER_OR_EQUAL,
                         self._scalar(value, FilterOperator.GREATER_OR_EQUAL))

    # -------------------------
    # membership, null, range
    # -------------------------
    def in_(self, field: str, values: Sequence[Scalar]) -> 'FilterExpression':
        return self._set(field, FilterOperator.IN, self._values(values, FilterOperator.IN))

    def not_in(self, field: str, values: Sequence[Scalar]) -> 'FilterExpression':
        return self._set(field, FilterOperator.NOT_IN, self._values(values, FilterOperator.NOT_IN))

    def is_null(self, field: str) -> 'FilterExpression':
        return self._set(field, FilterOperator.IS_NULL, True)

    def is_not_null(self, field: str) -> 'FilterExpression':
        return self._set(field, FilterOperator.IS_NOT_NULL, True)

    def between(self, field: str, bounds: Sequence[Scalar]) -> 'FilterExpression':
        return self._set(field, FilterOperator.BETWEEN, self._range(bounds, FilterOperator.BETWEEN))

    def not_between(self, field: str, bounds: Sequence[Scalar]) -> 'FilterExpression':
        return self._set(field, FilterOperator.NOT_BETWEEN, self._range(bounds, FilterOperator.NOT_BETWEEN))

    def is_empty(self, field: str) -> 'FilterExpression':
        return self._set_bare(field, FilterOperator.IS_EMPTY)

    def is_not_empty(self, field: str) -> 'FilterExpression':
        return self._set_bare(field, FilterOperator.IS_NOT_EMPTY)

    # -------------------------
    # string matching
    # -------------------------
    def _string(self, field: str, op: FilterOperator, value: str) -> 'FilterExpression':
        return self._set(field, op, self._text(value, op))

    def contains(self, field: str, value: str) -> 'FilterExpression':
        return self._string(field, FilterOperator.CONTAINS, value)

    def icontains(self, field: str, value: str) -> 'FilterExpression':
        return self._string(field, FilterOperator.ICONTAINS, value)

    def not_contains(self, field: str, value: str) -> 'FilterExpression':
        return self._string(field, FilterOperator.NOT_CONTAINS, value)

    def starts_with(self, field: str, value: str) -> 'FilterExpression':
        return self._string(field, FilterOperator.STARTS_WITH, value)

    def istarts_with(self, field: str, value: str) -> 'FilterExpression':
        return self._string(field, FilterOperator.ISTARTS_WITH, value)

    def not_starts_with(self, field: str, value: str) -> 'FilterExpression':
        return self._string(field, FilterOperator.NOT_STARTS_WITH, value)

    def not_istarts_with(self, field: str, value: str) -> 'FilterExpression':
        return self._string(field, FilterOperator.NOT_ISTARTS_WITH, value)

    def ends_with(self, field: str, value: str) -> 'FilterExpression':
        return self._string(field, FilterOperator.ENDS_WITH, value)

    def iends_with(self, field: str, value: str) -> 'FilterExpression':
        return self._string(field, FilterOperator.IENDS_WITH, value)

    def not_ends_with(self, field: str, value: str) -> 'FilterExpression':
        return self._string(field, FilterOperator.NOT_ENDS_WITH, value)

    def not_iends_with(self, field: str, value: str) -> 'FilterExpression':
        return self._string(field, FilterOperator.NOT_IENDS_WITH, value)

    # -------------------------
    # composition
    # -------------------------
    def and_(self, *others: Union['FilterExpression', Mapping[str, Any]]) -> 'FilterExpression':
        return self._append(FilterOperator.AND, others)

    def or_(self, *others: Union['FilterExpression', Mapping[str, Any]]) -> 'FilterExpression':
        return self._append(FilterOperator.OR, others)

    def is_blank(self) -> bool:
        return not self.clauses

    def to_dict(self) -> ClauseMap:
        return copy.deepcopy(self.clauses)
