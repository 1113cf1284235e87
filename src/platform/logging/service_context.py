"""
Service identification for log lines.

Every record carries `<service>@<env>:<instance>` so logs from several
replicas of the booking service can be told apart once aggregated.
"""

from functools import lru_cache
import os
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'booking-service')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers set HOSTNAME to the short container id; local runs fall back to the pid
    instance = os.getenv('HOSTNAME') or socket.gethostname() or ''
    instance_id = instance[:12] if deploy_env != 'local_dev' and instance else str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
