"""
Standard exit codes for starred-repos.

Following Unix/POSIX conventions for command-line tools.
"""

# Standard POSIX exit codes
SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # General errors
USAGE_ERROR = 2          # Misuse of shell command (wrong arguments, etc.)

# Application-specific exit codes (64-113 are typically available)
API_ERROR = 65           # GitHub answered with a non-success status
NETWORK_ERROR = 68       # Network connection failed
AUTH_ERROR = 69          # No access token available
DATA_ERROR = 70          # Response or cache body could not be decoded
PARTIAL_SUCCESS = 71     # Repos fetched, but an export failed


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class MissingCredentialError(CommandError):
    """Raised when a request is attempted without an access token."""
    def __init__(self, message: str = "No GitHub access token configured, is GITHUB_ACCESS set?"):
        super().__init__(message, AUTH_ERROR)


class NetworkError(CommandError):
    """Raised when the request cannot be sent or no response arrives."""
    def __init__(self, message: str):
        super().__init__(message, NETWORK_ERROR)


class StatusError(CommandError):
    """Raised when the API answers with a non-success status."""
    def __init__(self, url: str, status_code: int):
        super().__init__(f"{url} returned error with status {status_code}", API_ERROR)
        self.url = url
        self.status_code = status_code


class DeserializationError(CommandError):
    """Raised when a response or cached body is not a valid repo list."""
    def __init__(self, message: str):
        super().__init__(message, DATA_ERROR)
