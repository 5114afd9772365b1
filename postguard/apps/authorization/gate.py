import logging

from collections import namedtuple

from .decisions import BeforeResult
from .ownership import identity_of, resolve_actor

logger = logging.getLogger(__name__)


Rule = namedtuple('Rule', ['predicate', 'class_scoped', 'message', 'before'])


def _resource_type(target):
    return target if isinstance(target, type) else type(target)


def _describe(actor):
    identity = identity_of(actor)
    return 'anonymous' if identity is None else 'actor {}'.format(identity)


class Gate:
    """
    Explicit registry of authorization rules keyed by
    ``(resource type, action name)``.

    Every decision is a pure function of the actor, the action and the
    target. A gate holds no per-request state, so one instance can serve
    any number of concurrent callers once its rules are registered.
    """

    default_message = 'This action is unauthorized.'

    def __init__(self):
        self._rules = {}
        self._hooks = []

    def define(self, resource_type, action, predicate, class_scoped=False,
               message=None, before=None):
        if not isinstance(resource_type, type):
            raise TypeError(
                'Rules are registered against a resource type, '
                'got {!r}.'.format(resource_type)
            )

        self._rules[(resource_type, action)] = Rule(
            predicate=predicate,
            class_scoped=class_scoped,
            message=message or self.default_message,
            before=before,
        )

        return predicate

    def register_policy(self, resource_type, policy):
        for action in policy.actions:
            self.define(
                resource_type,
                action,
                policy.predicate_for(action),
                class_scoped=policy.is_class_action(action),
                message=policy.message_for(action),
                before=policy.before,
            )

        return policy

    def before(self, hook):
        """
        Install a hook that runs ahead of every rule. The hook is called
        with ``(actor, action, target)`` and returns a ``BeforeResult``.
        """
        self._hooks.append(hook)
        return hook

    def rule_for(self, resource_type, action):
        for klass in resource_type.__mro__:
            rule = self._rules.get((klass, action))
            if rule is not None:
                return rule

        return None

    def actions_for(self, resource_type):
        actions = []

        for klass in resource_type.__mro__:
            for (registered_type, action) in self._rules:
                if registered_type is klass and action not in actions:
                    actions.append(action)

        return actions

    def is_class_scoped(self, resource_type, action):
        rule = self.rule_for(resource_type, action)
        return rule is not None and rule.class_scoped

    def message_for(self, resource_type, action):
        rule = self.rule_for(resource_type, action)

        if rule is None:
            return self.default_message

        return rule.message

    def allows(self, actor, action, target):
        actor = resolve_actor(actor)
        resource_type = _resource_type(target)

        rule = self.rule_for(resource_type, action)
        if rule is None:
            logger.warning(
                'No rule registered for %r on %s; denying.',
                action, resource_type.__name__
            )
            return False

        verdict = self._run_hooks(rule, actor, action, target)
        if verdict is not None:
            return verdict

        if rule.class_scoped:
            allowed = bool(rule.predicate(actor))
        elif isinstance(target, type):
            logger.debug(
                '%r on %s needs an instance, got the class; denying.',
                action, resource_type.__name__
            )
            return False
        else:
            allowed = bool(rule.predicate(actor, target))

        if not allowed:
            logger.debug(
                'Denied %r on %s to %s.',
                action, resource_type.__name__, _describe(actor)
            )

        return allowed

    def denies(self, actor, action, target):
        return not self.allows(actor, action, target)

    def allows_all(self, actor, actions, target):
        return all(self.allows(actor, action, target) for action in actions)

    def abilities(self, actor, target, actions=None):
        """
        Map each action to its decision for ``actor`` on ``target``.

        Without an explicit list, every registered action that fits the
        target is included: class-scoped actions for a class, and
        instance-scoped actions for an instance.
        """
        if actions is None:
            resource_type = _resource_type(target)
            wants_class = isinstance(target, type)
            actions = [
                action for action in self.actions_for(resource_type)
                if self.is_class_scoped(resource_type, action) == wants_class
            ]

        return {
            action: self.allows(actor, action, target) for action in actions
        }

    def _run_hooks(self, rule, actor, action, target):
        hooks = list(self._hooks)
        if rule.before is not None:
            hooks.append(rule.before)

        for hook in hooks:
            result = hook(actor, action, target)

            if not isinstance(result, BeforeResult):
                raise TypeError(
                    'Before-hooks must return a BeforeResult, {!r} returned '
                    '{!r}.'.format(hook, result)
                )

            if result is BeforeResult.ALLOW:
                return True

            if result is BeforeResult.DENY:
                logger.debug(
                    'Before-hook %r denied %r to %s.',
                    hook, action, _describe(actor)
                )
                return False

        return None
