"""Centralized form constants, messages and simulated timings."""

# Field names per form schema (order is validation/display order)
LOGIN_FIELDS = ("email", "password")
SIGNUP_FIELDS = ("full_name", "email", "password", "confirm_password")

# Alternate spellings accepted by FormState.set_field
FIELD_ALIASES = {
    "fullName": "full_name",
    "confirmPassword": "confirm_password",
}

# Display labels for CLI output
FIELD_LABELS = {
    "full_name": "Full name",
    "email": "Email",
    "password": "Password",
    "confirm_password": "Confirm password",
}

MIN_PASSWORD_LENGTH = 6

# Validation messages
MESSAGES = {
    "email_required": "Email is required",
    "email_invalid": "Enter a valid email",
    "password_required": "Password is required",
    "password_short": f"Minimum {MIN_PASSWORD_LENGTH} characters",
    "name_required": "Name is required",
    "confirm_required": "Please confirm password",
    "confirm_mismatch": "Passwords do not match",
}

# Default failure messages surfaced through the transient notification sink
LOGIN_FAILURE_MESSAGE = "Invalid credentials"
SIGNUP_FAILURE_MESSAGE = "Sign up failed. Try again."

# Simulated timings (seconds)
DEFAULT_SIGN_IN_DELAY = 1.0
DEFAULT_SIGN_UP_DELAY = 1.2
DEFAULT_SPLASH_DURATION = 2.5

APP_NAME = "FlicksNow"
TAGLINE = "Book your favorite movies instantly!"
