# Gunicorn Production Configuration
# Carts and pricing rules live in process memory, so there must be exactly
# one worker process; concurrency comes from threads inside it.
workers = 1
threads = 8
worker_class = 'gthread'

# Resilience
timeout = 30
keepalive = 5

# Logging
accesslog = '-'       # Stdout
errorlog = '-'        # Stderr
loglevel = 'info'
capture_output = True
