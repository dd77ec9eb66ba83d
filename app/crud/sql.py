"""
SQL fragment helpers shared by the store modules.

- sql_for_partial_update: sparse field map -> "SET" assignments + values
- Projection: static column/field table used for SELECT/RETURNING lists
  and for shaping result rows
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from app.core.exceptions import InvalidUpdateRequest


@dataclass(frozen=True)
class SqlFragment:
    """
    Parameterized SQL text and its positional values.

    ``fragment`` references ``values`` as $1..$n in order.
    """
    fragment: str
    values: List[Any] = field(default_factory=list)


def sql_for_partial_update(data: Mapping[str, Any], field_mapping: Mapping[str, str]) -> SqlFragment:
    """
    Build the assignment list of an UPDATE from the fields being changed.

    Args:
        data: Public field name -> new value, e.g. {"firstName": "Aliya", "age": 32}
        field_mapping: Public field name -> column name, for fields whose
            column is named differently, e.g. {"firstName": "first_name"}

    Returns:
        SqlFragment('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Raises:
        InvalidUpdateRequest: If data is empty
    """
    if not data:
        raise InvalidUpdateRequest("No data")

    cols = [
        f'"{field_mapping.get(name, name)}"=${idx}'
        for idx, name in enumerate(data, start=1)
    ]
    return SqlFragment(fragment=", ".join(cols), values=list(data.values()))


def decimal_string(value: Any) -> Optional[str]:
    """Render a numeric column as a decimal string without float formatting."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return str(value)
    return str(Decimal(str(value)))


def as_bool(value: Any) -> bool:
    return bool(value)


@dataclass(frozen=True)
class ProjectedColumn:
    """A storage column and the public field it is exposed as."""
    column: str
    field: str
    convert: Optional[Callable[[Any], Any]] = None

    @property
    def select_expr(self) -> str:
        if self.column == self.field:
            return self.column
        return f'{self.column} AS "{self.field}"'


class Projection:
    """
    Static snake_case -> camelCase projection for one table.

    Usage:
        COMPANY = Projection(
            ProjectedColumn("handle", "handle"),
            ProjectedColumn("num_employees", "numEmployees"),
        )
        f"SELECT {COMPANY.select_list} FROM companies"
        COMPANY.shape(row)
    """

    def __init__(self, *columns: ProjectedColumn):
        self.columns: Tuple[ProjectedColumn, ...] = columns

    @property
    def select_list(self) -> str:
        return ", ".join(col.select_expr for col in self.columns)

    @property
    def fields(self) -> List[str]:
        return [col.field for col in self.columns]

    def shape(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        """Order a result row by the projection and apply column converters."""
        shaped = {}
        for col in self.columns:
            value = row[col.field]
            shaped[col.field] = col.convert(value) if col.convert and value is not None else value
        return shaped

    def shape_all(self, rows: List[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        return [self.shape(row) for row in rows]
