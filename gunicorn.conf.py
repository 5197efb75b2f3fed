"""
Gunicorn Configuration for Production
Usage: gunicorn -c gunicorn.conf.py wsgi:app
"""

import multiprocessing
import os

# Server socket
port = int(os.environ.get('PORT', 8080))
bind = f"0.0.0.0:{port}"

# Analytics requests are CPU-bound and short, sync workers fit
workers = int(os.environ.get('GUNICORN_WORKERS', multiprocessing.cpu_count() + 1))
worker_class = 'sync'
timeout = int(os.environ.get('GUNICORN_TIMEOUT', 20))
keepalive = 2

# Logging
accesslog = os.environ.get('GUNICORN_ACCESS_LOG', '-')  # '-' means stdout
errorlog = os.environ.get('GUNICORN_ERROR_LOG', '-')  # '-' means stderr
loglevel = os.environ.get('GUNICORN_LOG_LEVEL', 'info')
access_log_format = '%(h)s "%(r)s" %(s)s %(b)s %(D)s'

proc_name = 'myteamstats'

# Recycle workers periodically
max_requests = 2000
max_requests_jitter = 100
preload_app = True


def when_ready(server):
    """Called just after the server is started"""
    server.log.info("MyTeamStats analytics API is ready. Accepting connections.")


def post_fork(server, worker):
    """Called just after a worker has been forked"""
    server.log.info("Worker spawned (pid: %s)", worker.pid)
