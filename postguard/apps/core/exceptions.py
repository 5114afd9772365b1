from rest_framework.views import exception_handler


def core_exception_handler(exc, context):
    """
    Wrap every DRF error response in an ``errors`` envelope so clients see
    the same shape for not-found, access-denied and validation failures.
    """
    response = exception_handler(exc, context)

    if response is None:
        return response

    handlers = {
        'NotFound': _handle_detail_error,
        'PermissionDenied': _handle_detail_error,
        'NotAuthenticated': _handle_detail_error,
        'AuthenticationFailed': _handle_detail_error,
        'ValidationError': _handle_generic_error,
    }
    exception_class = exc.__class__.__name__

    handler = handlers.get(exception_class, _handle_generic_error)
    return handler(exc, context, response)


def _handle_generic_error(exc, context, response):
    response.data = {
        'errors': response.data
    }

    return response


def _handle_detail_error(exc, context, response):
    response.data = {
        'errors': {
            'detail': response.data.get('detail', str(exc))
        }
    }

    return response
