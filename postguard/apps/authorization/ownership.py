import math
import numbers
import re
import uuid

from decimal import Decimal


def resolve_actor(actor):
    """
    Collapse every spelling of "nobody" into ``None``.

    Django hands views an ``AnonymousUser`` rather than ``None``; both mean
    the caller is not authenticated.
    """
    if actor is None:
        return None

    if getattr(actor, 'is_authenticated', True) is False:
        return None

    return actor


def identity_of(actor):
    actor = resolve_actor(actor)

    if actor is None:
        return None

    identity = getattr(actor, 'pk', None)
    if identity is None:
        identity = getattr(actor, 'id', None)

    return identity


_INTEGER = re.compile(r'[+-]?\d+', re.ASCII)
_DECIMAL = re.compile(r'[+-]?(\d+\.\d*|\.\d+)', re.ASCII)
_UUID = re.compile(
    r'\{?[0-9a-f]{8}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{12}\}?',
    re.ASCII | re.IGNORECASE,
)


def _from_decimal(number):
    if number == number.to_integral_value():
        return int(number)

    return number.normalize()


def normalize_identity(value):
    """
    Return a canonical form of an identifier so that the same identity
    compares equal however the storage layer round-tripped it:
    ``5``, ``5.0``, ``'5'``, ``'5.0'`` and ``' 5 '`` all normalize to ``5``,
    and a UUID matches its text in any case, with or without hyphens.

    Text is only read as a number when it is plain decimal notation, so
    ``'1_0'`` or ``'1e1'`` stay text.
    """
    if value is None or isinstance(value, bool):
        return value

    if isinstance(value, numbers.Integral):
        return int(value)

    if isinstance(value, float) and math.isfinite(value):
        if value.is_integer():
            return int(value)
        return _from_decimal(Decimal(repr(value)))

    if isinstance(value, Decimal) and value.is_finite():
        return _from_decimal(value)

    if isinstance(value, uuid.UUID):
        return str(value)

    text = str(value).strip()
    if not text:
        return None

    if _INTEGER.fullmatch(text):
        return int(text)

    if _DECIMAL.fullmatch(text):
        return _from_decimal(Decimal(text))

    if _UUID.fullmatch(text):
        return str(uuid.UUID(text))

    return text


def same_identity(left, right):
    left, right = normalize_identity(left), normalize_identity(right)

    # True == 1 in Python, but a flag is never an identity.
    if left is None or right is None:
        return False
    if isinstance(left, bool) or isinstance(right, bool):
        return False

    return left == right


def is_owner(actor, resource, field='owner_id'):
    """True when ``actor`` is present and owns ``resource``."""
    identity = identity_of(actor)

    if identity is None:
        return False

    return same_identity(identity, getattr(resource, field, None))
