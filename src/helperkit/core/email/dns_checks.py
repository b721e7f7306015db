"""DNS-based checks for the domain part of an email address.

Each check issues exactly one resolver query and awaits it: no retries,
no caching. The lookup is bounded by ``timeout`` seconds (falling back to
the ``dns.timeout`` setting). Cancelling the awaiting task cancels the
query; cancellation is never reported as a failed check.
"""

from typing import Any, Optional, Sequence

import dns.asyncresolver
import dns.exception

from helperkit.utils.config_manager import get_settings
from helperkit.utils.errors import (
    ErrorHandler,
    InvalidInputError,
    ResolutionFailureError,
    ResolutionTimeoutError,
    returns_sentinel,
)
from helperkit.utils.logging import get_logger
from helperkit.utils.strings import is_not_empty

from .constants import RecordType
from .validation import get_domain, is_valid

logger = get_logger(__name__)


class DomainResolver:
    """Single-shot DNS lookups on top of the dnspython async resolver."""

    def __init__(
        self,
        nameservers: Optional[Sequence[str]] = None,
        timeout: Optional[float] = None,
    ):
        self.nameservers = list(nameservers) if nameservers else []
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "DomainResolver":
        settings = get_settings().dns
        return cls(nameservers=settings.nameservers, timeout=settings.timeout)

    def _build(self) -> dns.asyncresolver.Resolver:
        if self.nameservers:
            resolver = dns.asyncresolver.Resolver(configure=False)
            resolver.nameservers = self.nameservers
            return resolver
        return dns.asyncresolver.Resolver()

    @ErrorHandler.wrap
    async def resolve(
        self, domain: str, rdtype: str, timeout: Optional[float] = None
    ) -> Any:
        """Query ``rdtype`` records for ``domain`` and return the answer.

        Raises:
            InvalidInputError: If there is no domain to resolve.
            ResolutionTimeoutError: If the lookup exceeded its lifetime.
            ResolutionFailureError: For any other resolver error.
        """
        if not is_not_empty(domain):
            raise InvalidInputError("No domain to resolve", details={"rdtype": rdtype})

        lifetime = timeout if timeout is not None else self.timeout

        try:
            resolver = self._build()
            answer = await resolver.resolve(domain, rdtype, lifetime=lifetime, search=False)

        except dns.exception.Timeout as e:
            raise ResolutionTimeoutError(
                f"{rdtype} lookup for {domain} timed out",
                details={"domain": domain, "rdtype": rdtype, "timeout": lifetime},
            ) from e

        except dns.exception.DNSException as e:
            raise ResolutionFailureError(
                f"{rdtype} lookup for {domain} failed: {e.__class__.__name__}",
                details={"domain": domain, "rdtype": rdtype},
            ) from e

        logger.debug(f"{rdtype} lookup for {domain} returned {len(answer)} record(s)")
        return answer


def _resolver_or_default(resolver: Optional[DomainResolver]) -> DomainResolver:
    return resolver if resolver is not None else DomainResolver.from_settings()


async def mx_records(
    email: str,
    timeout: Optional[float] = None,
    resolver: Optional[DomainResolver] = None,
) -> Any:
    """Strict MX lookup for the domain of a valid address."""
    if not is_valid(email):
        raise InvalidInputError("Cannot look up MX records for an invalid email address")

    return await _resolver_or_default(resolver).resolve(
        get_domain(email), RecordType.MX, timeout
    )


@returns_sentinel(False)
async def validate_mx_record(
    email: str,
    timeout: Optional[float] = None,
    resolver: Optional[DomainResolver] = None,
) -> bool:
    """Check that the email is valid and its domain has MX records."""
    if not is_valid(email):
        return False

    answer = await mx_records(email, timeout=timeout, resolver=resolver)
    return len(answer) > 0


@returns_sentinel(False)
async def has_valid_domain(
    email: str,
    timeout: Optional[float] = None,
    resolver: Optional[DomainResolver] = None,
) -> bool:
    """Check that the domain of the email resolves.

    The domain is taken from ``get_domain``, which is empty for an invalid
    address, so invalid input fails at lookup time.
    """
    answer = await _resolver_or_default(resolver).resolve(
        get_domain(email), RecordType.ADDRESS, timeout
    )
    return len(answer) > 0
