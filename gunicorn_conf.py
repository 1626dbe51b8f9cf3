"""Gunicorn configuration for production ASGI deployment.

Usage:
    gunicorn springmon.main:app -c gunicorn_conf.py

Every value comes from ``springmon.core.config.settings``.
"""

from springmon.core.config import settings

bind = settings.bind
workers = settings.worker_count
worker_class = "uvicorn.workers.UvicornWorker"

timeout = settings.gunicorn_timeout
graceful_timeout = settings.gunicorn_graceful_timeout
keepalive = settings.gunicorn_keepalive

# Requests are logged by RequestContextMiddleware
accesslog = None
errorlog = "-"
loglevel = settings.log_level.lower()
proc_name = settings.service_name

# create_app() runs setup_logging in the master before workers fork
preload_app = True
max_requests = settings.gunicorn_max_requests
max_requests_jitter = settings.gunicorn_max_requests_jitter
