import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = 'Internal server error'


class InvalidInput(exceptions.ValidationError):
    """Rejected identifier or payload, raised by the business layer."""
    default_code = 'invalid'


class EntityNotFound(exceptions.NotFound):
    default_code = 'not_found'

    def __init__(self, label: str, pk):
        self.label = label
        self.pk = pk
        super().__init__(f'{label} with id {pk} not found')


def _error_code(exc, status_code: int) -> str:
    if isinstance(exc, EntityNotFound) or status_code == status.HTTP_404_NOT_FOUND:
        return 'not_found'
    if status_code == status.HTTP_400_BAD_REQUEST:
        return 'invalid'
    return 'api_error'


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    request = context.get('request')
    where = f"{getattr(request, 'method', '?')} {getattr(request, 'path', '?')}"
    if resp is None:
        set_rollback()
        logger.exception('unhandled error on %s', where)
        return Response(
            {'ok': False, 'error': {'code': 'server_error', 'message': GENERIC_SERVER_ERROR}},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    logger.warning('%s rejected with %s: %s', where, resp.status_code, exc)
    # normalize response
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    elif isinstance(resp.data, list) and len(resp.data) == 1:
        detail = resp.data[0]
    else:
        detail = resp.data
    return Response(
        {'ok': False, 'error': {'code': _error_code(exc, resp.status_code), 'message': detail}},
        status=resp.status_code,
    )
