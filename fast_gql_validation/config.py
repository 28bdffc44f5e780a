from fast_gql_validation.utils.env_utils import env_flag

# Log an INFO line for every field resolution rejected by argument validation
VALIDATION_LOG_FAILURES = env_flag("VALIDATION_LOG_FAILURES", True)
