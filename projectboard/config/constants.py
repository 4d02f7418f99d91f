"""Hard-coded configuration constants not meant to be user-configurable."""

# Media type a drag source declares for a project id payload
DRAG_MEDIA_TYPE = "text/plain"

# Message shown to the user when a new project submission is rejected
INVALID_INPUT_MESSAGE = "Invalid input, please try again!"

# Default form bounds (overridable through Settings)
DEFAULT_DESCRIPTION_MIN_LENGTH = 5
DEFAULT_MIN_PEOPLE = 1
DEFAULT_MAX_PEOPLE = 5
