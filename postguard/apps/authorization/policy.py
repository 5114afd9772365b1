from .decisions import BeforeResult
from .ownership import is_owner, resolve_actor


class Policy:
    """
    Groups the rules for one resource type.

    A policy lists the actions it answers in ``actions`` and implements one
    method per action, named after it. Class-scoped actions (listed in
    ``class_actions``) receive only the actor; every other action also
    receives the resource instance. Nothing is discovered implicitly: the
    gate registers exactly the names in ``actions``.
    """

    actions = ()
    class_actions = ('view_any', 'create')

    messages = {}
    default_message = 'This action is unauthorized.'

    reserved_names = frozenset({
        'actions', 'before', 'class_actions', 'default_message',
        'is_class_action', 'message_for', 'messages', 'predicate_for',
        'reserved_names',
    })

    def before(self, actor, action, target):
        return BeforeResult.ABSTAIN

    def is_class_action(self, action):
        return action in self.class_actions

    def message_for(self, action):
        return self.messages.get(action, self.default_message)

    def predicate_for(self, action):
        if action in self.reserved_names:
            raise ValueError(
                '{!r} is reserved and cannot be used as an action '
                'name.'.format(action)
            )

        predicate = getattr(self, action, None)

        if not callable(predicate):
            raise AttributeError(
                '{} lists {!r} in actions but does not implement '
                'it.'.format(type(self).__name__, action)
            )

        return predicate


class OwnershipPolicy(Policy):
    """
    Anyone may list, any authenticated actor may create, and only the
    owner may touch a single resource.
    """

    owner_field = 'owner_id'

    actions = ('view_any', 'view', 'create', 'update', 'delete')

    def owns(self, actor, resource):
        return is_owner(actor, resource, field=self.owner_field)

    def view_any(self, actor):
        return True

    def create(self, actor):
        return resolve_actor(actor) is not None

    def view(self, actor, resource):
        return self.owns(actor, resource)

    def update(self, actor, resource):
        return self.owns(actor, resource)

    def delete(self, actor, resource):
        return self.owns(actor, resource)
