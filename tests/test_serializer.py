import pytest

from schemagen.models.field_row import FieldRow
from schemagen.models.table_definition import TableDefinition
from schemagen.models.validation import ValidationErrorKind
from schemagen.serializer import InvalidDefinitionError, index_name, serialize


def _definition(*rows, model_name="users", primary_key_row_id=None):
    return TableDefinition(
        schema_name="public",
        rows=rows,
        model_name=model_name,
        primary_key_row_id=primary_key_row_id,
    )


def test_single_primary_key_column():
    text = serialize(
        _definition(
            FieldRow(id="a", name="id", data_type="uuid"),
            primary_key_row_id="a",
        )
    )

    # columns use the multi-line block form of the emitted grammar
    assert text == (
        'schema "public" {\n'
        '  table "users" {\n'
        '    column "id" {\n'
        "      type = uuid\n"
        "      null = false\n"
        "    }\n"
        "    primary_key { columns = [column.id] }\n"
        "  }\n"
        "}\n"
    )
    assert text.count('column "id"') == 1
    assert text.count("primary_key { columns = [column.id] }") == 1
    assert "default" not in text
    assert "index" not in text


def test_full_table():
    text = serialize(
        _definition(
            FieldRow(id="a", name="id", data_type="bigint"),
            FieldRow(
                id="b",
                name="email",
                data_type="text",
                is_unique=True,
            ),
            FieldRow(
                id="c",
                name="status",
                data_type="text",
                is_nullable=True,
                default_value="active",
            ),
            FieldRow(id="d", name="slug", data_type="varchar", is_unique=True),
            model_name="  Users ",
            primary_key_row_id="a",
        )
    )

    assert text == (
        'schema "public" {\n'
        '  table "Users" {\n'
        '    column "id" {\n'
        "      type = bigint\n"
        "      null = false\n"
        "    }\n"
        '    column "email" {\n'
        "      type = text\n"
        "      null = false\n"
        "    }\n"
        '    column "status" {\n'
        "      type = text\n"
        "      null = true\n"
        '      default = "active"\n'
        "    }\n"
        '    column "slug" {\n'
        "      type = varchar\n"
        "      null = false\n"
        "    }\n"
        "    primary_key { columns = [column.id] }\n"
        '    index "idx_Users_email" { columns = [column.email] unique = true }\n'
        '    index "idx_Users_slug" { columns = [column.slug] unique = true }\n'
        "  }\n"
        "}\n"
    )


def test_unique_index_name_contains_model_and_field():
    text = serialize(
        _definition(FieldRow(id="a", name="email", data_type="text", is_unique=True))
    )
    index_line = next(line for line in text.splitlines() if "index" in line)
    assert "users" in index_line
    assert "email" in index_line
    assert "unique = true" in index_line
    assert index_name("users", "email") == "idx_users_email"


def test_no_primary_key_block_without_selection():
    text = serialize(
        _definition(
            FieldRow(id="a", name="id", data_type="uuid"),
            FieldRow(id="b", name="name", data_type="text"),
        )
    )
    assert "primary_key" not in text


def test_whitespace_default_is_omitted():
    text = serialize(
        _definition(FieldRow(id="a", name="id", data_type="uuid", default_value="  "))
    )
    assert "default" not in text


def test_output_is_deterministic():
    definition = _definition(
        FieldRow(id="a", name="id", data_type="uuid", is_unique=True),
        primary_key_row_id="a",
    )
    assert serialize(definition) == serialize(definition)


def test_lenient_skips_incomplete_rows():
    text = serialize(
        _definition(
            FieldRow(id="a", name="", data_type="uuid", is_unique=True),
            FieldRow(id="b", name="email", data_type="", is_unique=True),
            FieldRow(id="c", name="id", data_type="uuid"),
            primary_key_row_id="a",
        )
    )
    assert text.count("column \"") == 1
    assert 'column "id"' in text
    assert "primary_key" not in text
    assert "index" not in text


def test_lenient_ignores_dangling_primary_key():
    text = serialize(
        _definition(FieldRow(id="a", name="id", data_type="uuid"), primary_key_row_id="gone")
    )
    assert "primary_key" not in text


def test_strict_rejects_invalid_definition():
    definition = _definition(FieldRow(id="a", name="1id", data_type="uuid"), model_name="")
    with pytest.raises(InvalidDefinitionError) as exc_info:
        serialize(definition, strict=True)

    assert exc_info.value.result.kinds() == {
        ValidationErrorKind.MISSING_MODEL_NAME,
        ValidationErrorKind.INVALID_FIELD_NAME_FORMAT,
    }
    assert isinstance(exc_info.value, ValueError)


def test_strict_accepts_valid_definition():
    definition = _definition(FieldRow(id="a", name="id", data_type="uuid"))
    assert serialize(definition, strict=True) == serialize(definition)
