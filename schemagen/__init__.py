from schemagen.models import FieldRow, RowField, TableDefinition
from schemagen.serializer import InvalidDefinitionError, serialize
from schemagen.store import FieldRowStore
from schemagen.validator import is_valid_field_name, validate

__all__ = [
    "FieldRow",
    "FieldRowStore",
    "InvalidDefinitionError",
    "RowField",
    "TableDefinition",
    "is_valid_field_name",
    "serialize",
    "validate",
]
