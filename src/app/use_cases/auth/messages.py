"""User-facing messages and error codes for the auth flow"""

from src.libs.result import Error

SIGNUP_SUCCESS = "Signup successful."
SIGNIN_SUCCESS = "Signin successful."
SIGNOUT_SUCCESS = "Signed out."
RESET_REQUEST_GENERIC = "If that account exists, a reset token was created."
RESET_REQUEST_DEV = "Reset token generated (dev mode)."
RESET_SUCCESS = "Password has been reset."

CREDENTIALS_REQUIRED = Error("VALIDATION_ERROR", "Email and password are required.")
EMAIL_REQUIRED = Error("VALIDATION_ERROR", "Email is required.")
RESET_FIELDS_REQUIRED = Error("VALIDATION_ERROR", "Token and new password are required.")
EMAIL_ALREADY_EXISTS = Error("EMAIL_ALREADY_EXISTS", "Email already registered.")
INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid credentials.")
ACCOUNT_NOT_FOUND = Error("ACCOUNT_NOT_FOUND", "User not found.")
INVALID_RESET_TOKEN = Error("INVALID_TOKEN", "Invalid or expired reset token.")
