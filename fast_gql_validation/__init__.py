"""
FastGqlValidation - declarative argument validation for graphql-core schemas

Rules are declared as SDL directives on arguments, input fields and input
object types. At schema build time they are compiled into rule chains; at
request time every validated field checks its arguments before its resolver
runs and reports all violations in one `AggregateValidationError`.

    schema = make_validated_schema(
        '''
        type Query {
          price(amount: Float! @validFloat(min: 10.1)): Float!
        }
        ''',
        {"Query": {"price": lambda _, info, amount: amount}},
    )
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .contracts import *  # noqa: F401,F403
from .core.compiler import compile_rules
from .core.reachability import ReachabilityMarker, mark_input_types
from .core.registry import ValidationRegistry
from .core.resolver_wrapper import ValidatedResolver, wrap_validated_resolvers
from .core.schema import (
    add_validation_to_schema,
    attach_resolvers,
    compile_validation,
    directive_type_defs,
    make_validated_schema,
)
from .core.types import (
    InputObjectMeta,
    RuleChain,
    RuleDeclaration,
    RuleFamily,
    RuleTarget,
    Violation,
)
from .core.validator import Validator, validate_value
from .directives import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
