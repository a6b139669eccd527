"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, request + error translation
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions return the models in ``city_forecast.schemas`` and raise
``ProviderError`` for anything the provider cannot answer. They never retry
and never filter: shaping the data is the job of ``analysis/``.
"""
