"""WSGI entrypoint for Gunicorn.

Serves the results API only; run `python main.py --scrape-only` to refresh
the stored results.

Usage:
  gunicorn -w 2 -b 0.0.0.0:3000 wsgi:app
"""

from loterias import create_app

app = create_app()
