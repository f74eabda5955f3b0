"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, request building
    └── {feature}.py      # Response parsing (one per endpoint/concept)

Only iNaturalist is implemented. Fetch functions return the models from
``observation_finder.schemas`` and raise the errors from
``observation_finder.exceptions``.
"""
