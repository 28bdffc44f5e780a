from typing import Iterable, List

from graphql import GraphQLError

from fast_gql_validation.core.types import Violation

ERROR_MESSAGE = "One or more validation errors were encountered"
ERROR_CODE = "VALIDATION_ERROR"


class AggregateValidationError(GraphQLError):
    """
    The single error surfaced for a field resolution whose arguments failed validation.

    Carries every violation in the order the validator produced them under
    `extensions["validationErrors"]` together with the stable `VALIDATION_ERROR` code.
    """

    def __init__(self, violations: Iterable[Violation]):
        violations = list(violations)
        super().__init__(
            ERROR_MESSAGE,
            extensions={
                "code": ERROR_CODE,
                "validationErrors": [violation.dict() for violation in violations],
            },
        )
        self.violations: List[Violation] = violations
