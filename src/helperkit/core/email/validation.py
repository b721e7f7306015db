"""Email validation and parsing utilities."""

from typing import Any, Optional, Tuple

from email_validator import EmailNotValidError, validate_email

from helperkit.utils.errors import InvalidEmailAddressError, returns_sentinel
from helperkit.utils.logging import get_logger, log_call
from helperkit.utils.strings import is_not_empty

from .constants import EMAIL_PATTERN, WHITESPACE_PATTERN

logger = get_logger(__name__)


class EmailValidator:
    """Validate and split email addresses, raising on invalid input."""

    @staticmethod
    def is_valid_email(email_address: Any) -> bool:
        """Validate email address format"""
        if not is_not_empty(email_address):
            return False

        return EMAIL_PATTERN.fullmatch(email_address) is not None

    @staticmethod
    def ensure_valid(email_address: Any) -> str:
        """Return the address unchanged, or raise InvalidEmailAddressError."""
        if not EmailValidator.is_valid_email(email_address):
            raise InvalidEmailAddressError(
                f"Invalid email address: {email_address!r}",
                details={"value_type": type(email_address).__name__},
            )
        return email_address

    @staticmethod
    def split(email_address: Any) -> Tuple[str, str]:
        """Split a valid address into (username, domain).

        Only the first two "@"-separated segments are kept.
        """
        parts = EmailValidator.ensure_valid(email_address).split("@")
        return parts[0], parts[1]

    @staticmethod
    def normalize(email_address: Any) -> str:
        """Strip all whitespace, lowercase, and validate the result."""
        if not isinstance(email_address, str):
            raise InvalidEmailAddressError(
                f"Email address must be a string, got {type(email_address).__name__}"
            )
        candidate = WHITESPACE_PATTERN.sub("", email_address).lower()
        return EmailValidator.ensure_valid(candidate)


class EmailAddress:
    """Value object for email addresses."""

    def __init__(self, address: str):
        self._address = EmailValidator.normalize(address)

    @classmethod
    def parse(cls, address: str) -> "EmailAddress":
        return cls(address)

    @property
    def address(self) -> str:
        return self._address

    @property
    def local_part(self) -> str:
        return self._address.split("@")[0]

    @property
    def domain(self) -> str:
        return self._address.split("@")[1]

    def __str__(self) -> str:
        return self._address

    def __repr__(self) -> str:
        return f"EmailAddress({self._address!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, EmailAddress):
            return False
        return self._address == other._address

    def __hash__(self) -> int:
        return hash(self._address)


## Sentinel API


@returns_sentinel(False)
def is_valid(email: Any) -> bool:
    """Check if the provided value is a syntactically valid email address."""
    return EmailValidator.is_valid_email(email)


@returns_sentinel("")
def get_domain(email: Any) -> str:
    """Return the domain of a valid email address, or "" if invalid."""
    return EmailValidator.split(email)[1]


@returns_sentinel("")
def get_username(email: Any) -> str:
    """Return the username of a valid email address, or "" if invalid."""
    return EmailValidator.split(email)[0]


@returns_sentinel("")
def normalize(email: Any) -> str:
    """Return the lowercased, whitespace-free address, or "" if invalid."""
    return EmailValidator.normalize(email)


@log_call
def validate_address(
    email: str, check_deliverability: bool = False
) -> Tuple[Optional[str], Optional[str]]:
    """Validate an address against the RFC grammar.

    Returns (normalized_address, None) on success and (None, error_message)
    on failure.
    """
    if not is_not_empty(email):
        return None, "Email address is required."

    try:
        valid = validate_email(email, check_deliverability=check_deliverability)
        return valid.normalized, None
    except EmailNotValidError as e:
        error_msg = f"Invalid email address: {e}"
        logger.debug(error_msg)
        return None, error_msg
