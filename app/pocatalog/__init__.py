"""pocatalog - translation catalog engine with gettext PO import/export.

Packages:
- po: PO parser, exporter and entry/catalog conversion
- i18n: translation catalog, key resolution, translator service and loaders
- configuration: pydantic-settings based configuration
- logging: structlog setup
- operations: uniform success/failure result values
"""

__version__ = "0.1.0"
