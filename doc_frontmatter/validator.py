"""Validation of decoded frontmatter against a caller-supplied schema.

Three independent checks, each returning its own list of issues:
- validate_shape: types, required properties, enum/format/... constraints
- find_unknown_keys: keys the schema does not declare
- find_misordered_keys: declared keys that appear out of schema order

``validate_frontmatter`` runs the ones that are enabled and concatenates
their results in that order. None of them raises on bad content.
"""

from __future__ import annotations

import logging
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .exceptions import SchemaDefinitionError
from .models import FrontmatterSchema
from .models import ValidationIssue

logger = logging.getLogger(__name__)

SchemaLike = FrontmatterSchema | dict[str, Any] | None


def _lift_required_flags(schema: dict[str, Any]) -> dict[str, Any]:
    """Turn property-level ``required: true`` flags into a ``required`` list.

    Property specs written in the older style mark themselves as required;
    draft 7 wants the list on the parent object instead. Nested object
    properties and array ``items`` schemas are handled the same way.
    """
    result = dict(schema)

    items = schema.get("items")
    if isinstance(items, dict):
        result["items"] = _lift_required_flags(items)
    elif isinstance(items, list):
        result["items"] = [_lift_required_flags(item) if isinstance(item, dict) else item for item in items]

    properties = schema.get("properties")
    if not isinstance(properties, dict):
        return result

    required = list(schema.get("required") or []) if isinstance(schema.get("required"), list) else []
    lifted: dict[str, Any] = {}
    for name, spec in properties.items():
        if isinstance(spec, dict):
            spec = dict(spec)
            flag = spec.get("required")
            if isinstance(flag, bool):
                del spec["required"]
                if flag and name not in required:
                    required.append(name)
            spec = _lift_required_flags(spec)
        lifted[name] = spec

    result["properties"] = lifted
    if required:
        result["required"] = required
    elif isinstance(result.get("required"), bool):
        del result["required"]
    return result


def build_validator(schema: SchemaLike) -> Draft7Validator:
    """Create a format-checking draft 7 validator for ``schema``.

    Raises:
        SchemaDefinitionError: the schema itself is not valid
    """
    json_schema = _lift_required_flags(FrontmatterSchema.coerce(schema).to_json_schema())
    try:
        Draft7Validator.check_schema(json_schema)
    except SchemaError as e:
        schema_path = "/".join(str(p) for p in e.path)
        raise SchemaDefinitionError(e.message, schema_path=schema_path or None) from e
    return Draft7Validator(json_schema, format_checker=Draft7Validator.FORMAT_CHECKER)


def _missing_property(error: JsonSchemaValidationError) -> str | None:
    # jsonschema yields one "required" error per missing name, in list order
    for name in error.validator_value:
        if error.message == f"{name!r} is a required property":
            return str(name)
    missing = [name for name in error.validator_value if name not in error.instance]
    return str(missing[0]) if missing else None


def _error_property(error: JsonSchemaValidationError) -> str | None:
    path = [str(p) for p in error.absolute_path]
    if error.validator == "required" and isinstance(error.instance, dict):
        missing = _missing_property(error)
        if missing is not None:
            path.append(missing)
    return ".".join(path) or None


def validate_shape(
    fields: dict[Any, Any],
    schema: SchemaLike,
    filepath: str | None = None,
) -> list[ValidationIssue]:
    """Check types and constraints of ``fields`` with jsonschema."""
    validator = build_validator(schema)
    errors = sorted(validator.iter_errors(fields), key=lambda e: [str(p) for p in e.absolute_path])
    return [
        ValidationIssue(
            property=_error_property(error),
            message=error.message,
            reason=str(error.validator) if error.validator is not None else None,
            filepath=filepath,
        )
        for error in errors
    ]


def find_unknown_keys(
    fields: dict[Any, Any],
    schema: SchemaLike,
    filepath: str | None = None,
) -> list[ValidationIssue]:
    """Report every key the schema does not declare, in document order."""
    allowed_keys = FrontmatterSchema.coerce(schema).allowed_keys
    allowed = set(allowed_keys)
    message = f"not allowed. Allowed properties are: {', '.join(allowed_keys)}"
    return [
        ValidationIssue(property=str(key), message=message, filepath=filepath)
        for key in fields
        if str(key) not in allowed
    ]


def find_misordered_keys(
    fields: dict[Any, Any],
    schema: SchemaLike,
    filepath: str | None = None,
) -> list[ValidationIssue]:
    """Report one issue when declared keys are not in schema order.

    Keys the schema does not declare are left out of the comparison on both
    sides; ``find_unknown_keys`` is the check that reports them.
    """
    allowed_keys = FrontmatterSchema.coerce(schema).allowed_keys
    existing_keys = [str(key) for key in fields]
    allowed = set(allowed_keys)
    present = set(existing_keys)

    current = [key for key in existing_keys if key in allowed]
    expected = [key for key in allowed_keys if key in present]
    if current == expected:
        return []

    return [
        ValidationIssue(
            property="keys",
            message=f"keys must be in order. Current: {','.join(current)}; Expected: {','.join(expected)}",
            filepath=filepath,
        )
    ]


def validate_frontmatter(
    fields: dict[Any, Any],
    schema: SchemaLike,
    filepath: str | None = None,
    validate_key_names: bool = False,
    validate_key_order: bool = False,
) -> list[ValidationIssue]:
    """Run shape validation plus the enabled key checks.

    Returns:
        Shape issues, then unknown-key issues, then the ordering issue
    """
    issues = validate_shape(fields, schema, filepath)
    if validate_key_names:
        issues.extend(find_unknown_keys(fields, schema, filepath))
    if validate_key_order:
        issues.extend(find_misordered_keys(fields, schema, filepath))

    if issues:
        logger.debug("Found %d frontmatter issue(s) in %s", len(issues), filepath or "<string>")
    return issues
