"""Email address helpers.

Syntax checks and parsing are synchronous; DNS checks are coroutines.

Usage Examples
----------------

    >>> from helperkit.core.email import is_valid, get_domain, normalize
    >>> is_valid("user@example.com")
    True
    >>> get_domain("user@example.com")
    'example.com'
    >>> normalize(" User@EXAMPLE.com")
    'user@example.com'

DNS checks:
    >>> from helperkit.core.email import validate_mx_record
    >>> await validate_mx_record("user@example.com", timeout=2.0)

Notes
-----
- Module-level helpers never raise; they return False or "" on failure
- EmailValidator and mx_records raise InvalidEmailAddressError,
  InvalidInputError or ResolutionFailureError instead
"""

from .dns_checks import DomainResolver, has_valid_domain, mx_records, validate_mx_record
from .validation import (
    EmailAddress,
    EmailValidator,
    get_domain,
    get_username,
    is_valid,
    normalize,
    validate_address,
)

__all__ = [
    # Validation
    "EmailAddress",
    "EmailValidator",
    "is_valid",
    "get_domain",
    "get_username",
    "normalize",
    "validate_address",
    # DNS
    "DomainResolver",
    "mx_records",
    "validate_mx_record",
    "has_valid_domain",
]
