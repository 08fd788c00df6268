"""Schema registry exports."""

from .registry_models import ExternalSchemaRegistry, JsonObject, JsonValue
from .schema_registration import ID_KEY, SCHEMA_KEY, register_external_schemas

__all__ = [
    "ExternalSchemaRegistry",
    "ID_KEY",
    "JsonObject",
    "JsonValue",
    "SCHEMA_KEY",
    "register_external_schemas",
]
