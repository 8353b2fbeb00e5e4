from enum import Enum


class FilterOperator(str, Enum):
    """Operator names understood by the server's filter grammar"""
    EQUALS = "_eq"
    NOT_EQUALS = "_neq"
    LESS_THAN = "_lt"
    LESS_OR_EQUAL = "_lte"
    GREATER_THAN = "_gt"
    GREATER_OR_EQUAL = "_gte"
    IN = "_in"
    NOT_IN = "_nin"
    IS_NULL = "_null"
    IS_NOT_NULL = "_nnull"
    CONTAINS = "_contains"
    ICONTAINS = "_icontains"
    NOT_CONTAINS = "_ncontains"
    STARTS_WITH = "_starts_with"
    ISTARTS_WITH = "_istarts_with"
    NOT_STARTS_WITH = "_nstarts_with"
    NOT_ISTARTS_WITH = "_nistarts_with"
    ENDS_WITH = "_ends_with"
    IENDS_WITH = "_iends_with"
    NOT_ENDS_WITH = "_nends_with"
    NOT_IENDS_WITH = "_niends_with"
    BETWEEN = "_between"
    NOT_BETWEEN = "_nbetween"
    IS_EMPTY = "_empty"
    IS_NOT_EMPTY = "_nempty"

    AND = "_and"
    OR = "_or"
