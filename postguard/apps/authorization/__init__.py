"""
Centralized authorization for postguard.

The :class:`~postguard.apps.authorization.gate.Gate` answers one question:
may this actor perform this action on this resource (or resource class)?
Policies are registered against resource types explicitly; callers hold a
reference to a gate and pass the actor, action and target every time.
"""

from .decisions import BeforeResult, allow_superusers
from .gate import Gate, Rule
from .ownership import is_owner, same_identity
from .policy import OwnershipPolicy, Policy

__all__ = [
    'BeforeResult',
    'Gate',
    'OwnershipPolicy',
    'Policy',
    'Rule',
    'allow_superusers',
    'is_owner',
    'same_identity',
]
