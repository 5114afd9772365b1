import enum


class BeforeResult(enum.Enum):
    """
    Outcome of a before-hook.

    ``ABSTAIN`` hands the decision to the per-action rule; ``ALLOW`` and
    ``DENY`` settle it without consulting the rule at all.
    """

    ALLOW = 'allow'
    ABSTAIN = 'abstain'
    DENY = 'deny'


def allow_superusers(actor, action, target):
    """Let superusers through every registered action."""
    if actor is not None and getattr(actor, 'is_superuser', False):
        return BeforeResult.ALLOW

    return BeforeResult.ABSTAIN
