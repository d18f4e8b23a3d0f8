"""User-facing messages returned in API envelopes."""

EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Email is not valid"
FIRST_NAME_REQUIRED = "First name is required"
FIRST_NAME_TOO_SHORT = "First name must be at least 2 characters"
LAST_NAME_REQUIRED = "Last name is required"
LAST_NAME_TOO_SHORT = "Last name must be at least 2 characters"

EMAIL_TOO_LONG = "Email must be at most 255 characters"
FIRST_NAME_TOO_LONG = "First name must be at most 255 characters"
LAST_NAME_TOO_LONG = "Last name must be at most 255 characters"

EMAIL_ALREADY_SUBSCRIBED = "This email is already subscribed"
SUBSCRIPTION_FAILED = "An error occurred during subscription. Please try again."
WELCOME = "Welcome {first_name} {last_name}! Thank you for subscribing."

SUBSCRIBER_DELETED = "Subscriber deleted"
SUBSCRIBER_NOT_FOUND = "Subscriber not found"

SERVER_ERROR = "Server error"
ROUTE_NOT_FOUND = "Route not found"
INTERNAL_ERROR = "An internal error occurred"
