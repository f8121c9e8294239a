import json
import re

import pytest

from sql_schema_to_code.catalog import load_catalog, load_catalog_file, statement_namespace
from sql_schema_to_code.errors import CatalogError
from sql_schema_to_code.model import ColumnDescriptor, NamespacePath


def test_tables_statements_and_raw_shapes_in_order():
    shapes = load_catalog(
        {
            "package": "com.example",
            "row_shapes": [{"namespace": ["a", "b"], "name": "Person2", "columns": [{"name": "id", "type": "integer"}]}],
            "statements": [{"file": "queries/Stmts1.sql", "name": "loadAll", "columns": [{"name": "id", "type": "integer"}]}],
            "tables": [{"schema": "Public", "name": "Person", "columns": [{"name": "id", "type": "integer", "nullable": True}]}],
        }
    )
    assert [s.qualified_name for s in shapes] == [
        "com.example.schema_public.Person",
        "com.example.queries.stmts1.LoadAll",
        "a.b.Person2",
    ]
    assert shapes[0].columns == (ColumnDescriptor("id", "integer", True),)


def test_table_without_package_defaults_to_public_schema():
    shapes = load_catalog({"tables": [{"name": "T", "columns": []}]})
    assert shapes[0].namespace == NamespacePath(("schema_public",))


def test_raw_shape_with_dotted_namespace():
    shapes = load_catalog({"row_shapes": [{"namespace": "x.y", "name": "T", "columns": []}]})
    assert shapes[0].namespace == NamespacePath(("x", "y"))


def test_statement_namespace():
    assert statement_namespace(["p"], "subdir/subsubdir/StmtsCamelCase2.sql") == ["p", "subdir", "subsubdir", "stmtscamelcase2"]
    assert statement_namespace([], "Stmts1.sql") == ["stmts1"]
    assert statement_namespace([], "sub\\Stmts.sql") == ["sub", "stmts"]


@pytest.mark.parametrize(
    "data, message",
    [
        ([], "JSON object"),
        ({"tables": [{"columns": []}]}, "tables[0]: missing 'name'"),
        ({"tables": [{"name": "T"}]}, "tables[0]: missing 'columns'"),
        ({"tables": [{"name": "T", "columns": {}}]}, "tables[0]: 'columns' must be list, got dict"),
        ({"tables": None}, "catalog: 'tables' must be list, got NoneType"),
        ({"statements": {}}, "catalog: 'statements' must be list"),
        ({"package": 3, "tables": []}, "catalog: 'package' must be str or list"),
        ({"package": ["com", 1]}, "catalog: 'package' entries must be str"),
        ({"tables": [{"name": "T", "schema": 1, "columns": []}]}, "tables[0]: 'schema' must be str, got int"),
        ({"tables": [{"name": 7, "columns": []}]}, "tables[0]: 'name' must be str, got int"),
        ({"tables": [{"name": "T", "columns": [{"name": "id", "type": None}]}]}, "column 0: 'type' must be str, got NoneType"),
        ({"tables": [{"name": "T", "columns": [{"name": "id", "type": 4}]}]}, "column 0: 'type' must be str, got int"),
        ({"tables": [{"name": "T", "columns": [{"name": 1, "type": "text"}]}]}, "column 0: 'name' must be str, got int"),
        ({"tables": [{"name": "T", "columns": [{"name": "id", "type": "text", "nullable": "false"}]}]}, "column 0: 'nullable' must be bool, got str"),
        ({"tables": [{"name": "T", "columns": ["id"]}]}, "column 0: expected an object, got str"),
        ({"statements": [{"name": "s", "file": 5, "columns": []}]}, "statements[0]: 'file' must be str, got int"),
        ({"row_shapes": [{"namespace": 5, "name": "T", "columns": []}]}, "row_shapes[0]: 'namespace' must be str or list"),
        ({"row_shapes": [{"namespace": ["a", None], "name": "T", "columns": []}]}, "row_shapes[0]: 'namespace' entries must be str"),
        ({"tables": [{"name": "order items", "columns": []}]}, "tables[0]: 'order items' is not a valid declaration name"),
        ({"statements": [{"name": "load-all", "file": "s.sql", "columns": []}]}, "statements[0]: 'Load-all' is not a valid declaration name"),
        ({"row_shapes": [{"namespace": ["a"], "name": "1st", "columns": []}]}, "row_shapes[0]: '1st' is not a valid declaration name"),
        ({"tables": [{"name": "T", "columns": [{"name": "id"}]}]}, "column 0: missing 'type'"),
        ({"tables": [{"name": "T", "columns": [{"name": "", "type": "text"}]}]}, "column 0"),
        ({"statements": [{"name": "s", "columns": []}]}, "statements[0]: missing 'file'"),
        ({"row_shapes": [{"namespace": [], "name": "T", "columns": []}]}, "row_shapes[0]"),
        ({"row_shapes": [{"namespace": ["a"], "name": "T", "columns": [{"name": "x", "type": "text"}, {"name": "x", "type": "text"}]}]}, "Duplicate column"),
    ],
)
def test_malformed_catalogs(data, message):
    with pytest.raises(CatalogError, match=re.escape(message)):
        load_catalog(data)


def test_load_catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"tables": [{"name": "T", "columns": [{"name": "id", "type": "integer"}]}]}))
    assert [s.declaration_name for s in load_catalog_file(path)] == ["T"]


def test_load_invalid_json(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("{not json")
    with pytest.raises(CatalogError, match="Invalid catalog file"):
        load_catalog_file(path)


def test_nullable_must_be_boolean_true():
    shapes = load_catalog({"tables": [{"name": "T", "columns": [{"name": "id", "type": "integer", "nullable": True}, {"name": "x", "type": "text"}]}]})
    assert [c.nullable for c in shapes[0].columns] == [True, False]


def test_dollar_and_underscore_declaration_names():
    shapes = load_catalog({"row_shapes": [{"namespace": ["a"], "name": "$Row_1", "columns": []}]})
    assert shapes[0].declaration_name == "$Row_1"
