"""
JSON Schema Contract Validators

In-memory контракт элемента: Q(n) / D(n) ↔ JSON-совместимый dict.
Dict валидируется против JSON Schema (библиотека jsonschema) при обмене
элементами между вызывающим кодом. Модуль не читает и не пишет файлы с
элементами: формат хранения и wire-протокол не определяются.

Схемы:
- quaternion_element.json (элемент Q(n) или D(n))
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Union

import jsonschema
from jsonschema import Draft202012Validator

from quaternion_group.domain.dihedral import DihedralElement, DihedralKind
from quaternion_group.domain.element import ElementKind, QuaternionElement
from quaternion_group.math.zmod import ZMod

ELEMENT_SCHEMA_NAME: Final[str] = "quaternion_element"

GROUP_QUATERNION: Final[str] = "quaternion"
GROUP_DIHEDRAL: Final[str] = "dihedral"

GroupElement = Union[QuaternionElement, DihedralElement]


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем (package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'quaternion_element')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class ElementContractValidator(ContractValidator):
    """Валидатор для quaternion_element контракта."""

    def __init__(self):
        super().__init__(ELEMENT_SCHEMA_NAME)


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


def element_to_contract(x: GroupElement) -> Dict[str, Any]:
    """
    Сериализация элемента в dict по контракту quaternion_element.

    Индекс — канонический представитель (для n = 0 — точное целое).

    Examples:
        >>> element_to_contract(xa(2, 5))
        {'group': 'quaternion', 'n': 2, 'kind': 'xa', 'index': 1}
    """
    if isinstance(x, QuaternionElement):
        group = GROUP_QUATERNION
    elif isinstance(x, DihedralElement):
        group = GROUP_DIHEDRAL
    else:
        raise TypeError(f"Cannot serialize {type(x).__name__} as a group element")

    return {
        "group": group,
        "n": x.n,
        "kind": x.kind.value,
        "index": x.index.value,
    }


def element_from_contract(data: Dict[str, Any]) -> GroupElement:
    """
    Десериализация элемента из dict с валидацией контракта.

    Raises:
        jsonschema.ValidationError: Если dict не соответствует схеме
        ValueError: Если index не канонический (вне [0, modulus) при n > 0)
    """
    validate_element_contract(data)

    n = data["n"]
    index = data["index"]

    if data["group"] == GROUP_QUATERNION:
        modulus = 2 * n
        if modulus > 0 and index >= modulus:
            raise ValueError(f"index {index} out of range [0, {modulus}) for Q({n})")
        return QuaternionElement(
            n=n, kind=ElementKind(data["kind"]), index=ZMod.of(index, modulus)
        )

    if n > 0 and index >= n:
        raise ValueError(f"index {index} out of range [0, {n}) for D({n})")
    return DihedralElement(n=n, kind=DihedralKind(data["kind"]), index=ZMod.of(index, n))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_element_contract(data: Dict[str, Any]) -> None:
    """
    Валидация quaternion_element данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    ElementContractValidator().validate(data)
