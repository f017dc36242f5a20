"""
Route prefixes and the catalogue of messages sent in response envelopes.
"""

API_PREFIX = "/api/v1"


class Messages:
    SUCCESS = "Success"
    ERROR = "An error occurred"
    FETCHED = "Data fetched successfully"

    # Auth
    LOGIN_SUCCESS = "Login successful"
    REGISTER_SUCCESS = "Registration successful"
    USER_EXISTS = "User already exists"
    ALREADY_EXISTS = "Resource already exists"
    MISSING_CREDENTIALS = "Email/Password missing"
    MISSING_REQUIRED_FIELDS = "Missing required fields"
    USER_NOT_FOUND = "User not found"
    EMAIL_NOT_FOUND = "Email not found"
    INVALID_PASSWORD = "Invalid Password"
    WRONG_PASSWORD = "Wrong password"
    TOKEN_REQUIRED = "Token is required"
    NO_TOKEN = "No token provided"
    INVALID_TOKEN = "Invalid or expired token"
    SIGNUP_FAILED = "Signup failed"
    LOGIN_FAILED = "Unable to login"

    # Generic
    VALIDATION_ERROR = "Validation error"
    NOT_FOUND = "Resource not found"
    INTERNAL_SERVER_ERROR = "Internal server error"


# Sanitized error code attached to 500 envelopes in place of the raw exception.
INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
