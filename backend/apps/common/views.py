import time

from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _db_check(alias='default'):
    """Run ``SELECT 1`` on one connection and report latency or the failure."""
    started = time.perf_counter()
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute('SELECT 1')
    except OperationalError as e:
        logger.warning('Database unreachable', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    latency = round((time.perf_counter() - started) * 1000, 2)
    return {'status': 'ok', 'latency_ms': latency}


def live_health(request):
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Ready once users, carts and products can be read, i.e. the database answers."""
    database = _db_check()
    if database['status'] == 'ok':
        return JsonResponse({'status': 'ok', 'checks': {'database': database}})
    logger.info('Readiness probe failing', failing_components=['database'])
    return JsonResponse({'status': 'degraded', 'checks': {'database': database}}, status=503)
