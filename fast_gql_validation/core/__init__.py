"""Schema compilation and recursive validation.

Import the concrete modules directly (`core.compiler`, `core.validator`, ...);
the public surface is re-exported from :mod:`fast_gql_validation`.
"""
