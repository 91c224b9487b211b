import uuid
from enum import StrEnum

from pydantic import ConfigDict
from pydantic.dataclasses import dataclass


class RowField(StrEnum):
    """Attributes of a FieldRow that the editor may change."""

    NAME = "name"
    DATA_TYPE = "data_type"
    IS_NULLABLE = "is_nullable"
    IS_UNIQUE = "is_unique"
    DEFAULT_VALUE = "default_value"


@dataclass(frozen=True, config=ConfigDict(strict=True))
class FieldRow:
    """テーブルの1カラム分の定義"""

    id: str
    name: str = ""
    data_type: str = ""
    is_nullable: bool = False
    is_unique: bool = False
    default_value: str = ""  # 空文字はデフォルト値なし

    @classmethod
    def construct_auto(cls, data_type: str = ""):
        return cls(id=str(uuid.uuid4()), data_type=data_type)

    @property
    def has_default(self) -> bool:
        return self.default_value.strip() != ""
