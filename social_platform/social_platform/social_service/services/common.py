"""
Helpers shared by the account, social graph and messaging services.
"""
import functools
import logging

from ..auth import Identity
from ..errors import InvalidIdentityError, OperationFailedError, ServiceError

logger = logging.getLogger(__name__)


def require_user_id(identity: Identity) -> int:
    """Return the caller's user id, or raise if the identity carries none."""
    if identity is None or not identity.id:
        raise InvalidIdentityError()
    return identity.id


def service_operation(failure_message: str, include_cause: bool = False):
    """
    Wrap a service method so unexpected failures never escape raw.

    ``ServiceError`` subclasses pass through untouched. Anything else rolls
    back the service's session, is logged with its traceback and is raised
    again as ``OperationFailedError(failure_message)``. With
    ``include_cause`` the underlying error text is appended to the message.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except ServiceError:
                raise
            except Exception as e:
                self.db.rollback()
                logger.exception("%s.%s failed", type(self).__name__, func.__name__)
                message = failure_message
                if include_cause:
                    # DBAPI errors are wrapped; report the driver's own text
                    message = f"{failure_message}: {getattr(e, 'orig', None) or e}"
                raise OperationFailedError(message) from e
        return wrapper
    return decorator
