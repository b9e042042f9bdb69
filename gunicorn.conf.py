"""Gunicorn config for container deployment."""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"
wsgi_app = "travel_recs.main:app"

# Uvicorn async workers; each worker holds its own session and loads the dataset once
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

timeout = 60
graceful_timeout = 30

# Keep-alive must exceed the proxy keep-alive (default 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
