"""Schema document IO exports."""

from .document_io import (
    SchemaDocumentError,
    dump_schema_document,
    load_schema_document,
    load_yaml_text,
    parse_schema_text,
    write_schema_document,
)

__all__ = [
    "SchemaDocumentError",
    "dump_schema_document",
    "load_schema_document",
    "load_yaml_text",
    "parse_schema_text",
    "write_schema_document",
]
