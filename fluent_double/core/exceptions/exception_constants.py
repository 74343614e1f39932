UNSUPPORTED_METHOD = "Method '{method}' is not part of the '{surface}' surface (allowed: {allowed})"

METHOD_MISMATCH = "Call #{position} on chain '{chain}': expected {expected}, got {actual}"

ARGUMENT_COUNT_MISMATCH = (
    "Call #{position} on chain '{chain}' to '{method}': expected {expected}, got {actual}"
)

ARGUMENT_MISMATCH = (
    "Call #{position} on chain '{chain}' to '{method}': argument {argument} "
    "expected {expected}, got {actual}"
)

UNEXPECTED_EXTRA_CALL = (
    "Chain '{chain}' already consumed all {total} expected calls but received {actual}"
)

INCOMPLETE_CHAIN = "Chain '{chain}' has {count} expected call(s) that never happened:\n{remaining}"

TERMINAL_ON_EMPTY_CHAIN = "Cannot set a return directive on chain '{chain}': nothing recorded yet"

RECORDING_CLOSED = "Chain '{chain}' is sealed; replay has started and no more calls can be recorded"

UNKNOWN_SURFACE = "No method surface registered under '{surface}'"

DUPLICATE_SURFACE = "A method surface named '{surface}' is already registered"

RESERVED_METHOD_NAME = "Method name '{method}' on surface '{surface}' collides with a recorder/double attribute"

INVALID_METHOD_NAME = "Method name '{method}' on surface '{surface}' is not a valid public identifier"

CHILD_SURFACE_REQUIRED = "Method '{method}' on surface '{surface}' hands off to a child chain but names no child surface"

UNKNOWN_CHILD_CHAIN = "Chain '{chain}' is not registered in this session"
