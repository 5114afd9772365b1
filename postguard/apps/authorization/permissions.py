from rest_framework.permissions import BasePermission

from .ownership import resolve_actor


def actor_from_request(request):
    """The authenticated user behind ``request``, or ``None``."""
    return resolve_actor(getattr(request, 'user', None))


class GatePermission(BasePermission):
    """
    Delegates every decision to the view's gate.

    The view supplies ``get_gate()``, ``resource_type`` and
    ``get_policy_action()``. Class-scoped actions are decided in
    ``has_permission`` against the resource class; instance-scoped actions
    wait for ``check_object_permissions`` and are decided against the
    fetched object, after the lookup has had its chance to raise a 404.
    ``OPTIONS`` requests always pass.
    """

    message = 'This action is unauthorized.'

    def has_permission(self, request, view):
        if request.method == 'OPTIONS':
            return True

        action = view.get_policy_action()

        if action is None:
            return False

        gate = view.get_gate()
        if not gate.is_class_scoped(view.resource_type, action):
            return True

        return self._decide(request, view, gate, action, view.resource_type)

    def has_object_permission(self, request, view, obj):
        action = view.get_policy_action()

        if action is None:
            return False

        gate = view.get_gate()
        if gate.is_class_scoped(view.resource_type, action):
            return True

        return self._decide(request, view, gate, action, obj)

    def _decide(self, request, view, gate, action, target):
        if gate.allows(actor_from_request(request), action, target):
            return True

        self.message = gate.message_for(view.resource_type, action)
        return False
