"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "resolver.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Resolver configuration template for schema-ref-resolver.
# Every setting is optional; remove the ones you do not need.

resolver:
  # $id assumed for a root schema without its own $id.
  application_uri: ""
  # Target draft; "draft-08" switches the default def_element to "$defs".
  target: "draft-07"
  # Where embedded definitions are written; may contain "/" for nesting.
  # def_element: "definitions"
  # Prefix of generated definition keys (def-0, def-1, ...).
  def_prefix: "def-"
  # Strip $id from embedded external schemas.
  delete_id: true
  # Keep a stripped $id inside $comment.
  comment_id: false
  # Embed reachable external schemas when resolving.
  merge_definitions: true

# Pre-registered external schemas, referenced from the root schema by $id.
# Relative paths are resolved against this file's directory.
external_schemas:
  # - path: "schemas/Animal.json"
  # - inline: {"$id": "urn:example:pet", "type": "object"}
"""


def build_placeholder_configuration() -> str:
    """Build a YAML resolver configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder resolver configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(
            f"Resolver configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
