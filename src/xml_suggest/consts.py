"""High-value constants for the xml-suggest package."""

# Package metadata
PACKAGE_VERSION = "0.3.0"
PACKAGE_NAME = "xml-suggest"

# Validator error codes with a quick-fix participant
INVALID_CHILD_CODE = "cvc-complex-type.2.4.a"

# Business logic consts
MAX_DISTANCE_DIFF_RATIO = 0.4  # fraction of the reference name length
SIMILAR_LABEL = "Did you mean '{name}'?"
OTHER_LABEL = "Replace with '{name}'"
