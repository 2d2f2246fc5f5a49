"""Shader data types, their properties, and shader domains."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ShaderDataType(IntEnum):
    """GLSL data types understood by the engine."""

    NONE = 0
    BOOL = 1
    INT = 2
    UINT = 3
    FLOAT = 4
    BVEC2 = 5
    BVEC3 = 6
    BVEC4 = 7
    IVEC2 = 8
    IVEC3 = 9
    IVEC4 = 10
    UVEC2 = 11
    UVEC3 = 12
    UVEC4 = 13
    VEC2 = 14
    VEC3 = 15
    VEC4 = 16
    MAT2 = 17
    MAT2x2 = 18
    MAT3 = 19
    MAT3x3 = 20
    MAT4 = 21
    MAT4x4 = 22
    MAT2x3 = 23
    MAT2x4 = 24
    MAT3x2 = 25
    MAT3x4 = 26
    MAT4x2 = 27
    MAT4x3 = 28
    TEXTURE2D = 29
    STRUCT = 30  # always last


class ShaderDataClass(IntEnum):
    NONE = 0
    SCALAR = 1
    VECTOR = 2
    MATRIX = 3
    STRUCT = 4
    TEXTURE = 5


class ShaderDataBaseType(IntEnum):
    NONE = 0
    BOOL = 1
    INT = 2
    UINT = 3
    UINT64 = 4
    FLOAT = 5


class ShaderDomain(IntEnum):
    VERTEX = 0
    FRAGMENT = 1
    GEOMETRY = 2


SHADER_DOMAIN_COUNT = len(ShaderDomain)


class StorageBlockType(IntEnum):
    UNIFORM = 0
    SHADER_STORAGE = 1


# OpenGL enumerants
GL_INVALID_ENUM = 0x0500
GL_BOOL = 0x8B56
GL_INT = 0x1404
GL_UNSIGNED_INT = 0x1405
GL_FLOAT = 0x1406
GL_BOOL_VEC2 = 0x8B57
GL_BOOL_VEC3 = 0x8B58
GL_BOOL_VEC4 = 0x8B59
GL_INT_VEC2 = 0x8B53
GL_INT_VEC3 = 0x8B54
GL_INT_VEC4 = 0x8B55
GL_UNSIGNED_INT_VEC2 = 0x8DC6
GL_UNSIGNED_INT_VEC3 = 0x8DC7
GL_UNSIGNED_INT_VEC4 = 0x8DC8
GL_FLOAT_VEC2 = 0x8B50
GL_FLOAT_VEC3 = 0x8B51
GL_FLOAT_VEC4 = 0x8B52
GL_FLOAT_MAT2 = 0x8B5A
GL_FLOAT_MAT3 = 0x8B5B
GL_FLOAT_MAT4 = 0x8B5C
GL_FLOAT_MAT2x3 = 0x8B65
GL_FLOAT_MAT2x4 = 0x8B66
GL_FLOAT_MAT3x2 = 0x8B67
GL_FLOAT_MAT3x4 = 0x8B68
GL_FLOAT_MAT4x2 = 0x8B69
GL_FLOAT_MAT4x3 = 0x8B6A
GL_TEXTURE_2D = 0x0DE1
GL_VERTEX_SHADER = 0x8B31
GL_FRAGMENT_SHADER = 0x8B30
GL_GEOMETRY_SHADER = 0x8DD9


@dataclass(frozen=True)
class _TypeInfo:
    data_class: ShaderDataClass
    base_type: ShaderDataBaseType
    name: str
    gl: int
    components: int
    column_type: ShaderDataType
    row_type: ShaderDataType


_T = ShaderDataType
_C = ShaderDataClass
_B = ShaderDataBaseType

_TYPE_INFO: dict[ShaderDataType, _TypeInfo] = {
    _T.NONE: _TypeInfo(_C.NONE, _B.NONE, "Invalid Type", GL_INVALID_ENUM, 0, _T.NONE, _T.NONE),
    _T.BOOL: _TypeInfo(_C.SCALAR, _B.BOOL, "bool", GL_BOOL, 1, _T.NONE, _T.NONE),
    _T.INT: _TypeInfo(_C.SCALAR, _B.INT, "int", GL_INT, 1, _T.NONE, _T.NONE),
    _T.UINT: _TypeInfo(_C.SCALAR, _B.UINT, "uint", GL_UNSIGNED_INT, 1, _T.NONE, _T.NONE),
    _T.FLOAT: _TypeInfo(_C.SCALAR, _B.FLOAT, "float", GL_FLOAT, 1, _T.NONE, _T.NONE),
    _T.BVEC2: _TypeInfo(_C.VECTOR, _B.BOOL, "bvec2", GL_BOOL_VEC2, 2, _T.NONE, _T.NONE),
    _T.BVEC3: _TypeInfo(_C.VECTOR, _B.BOOL, "bvec3", GL_BOOL_VEC3, 3, _T.NONE, _T.NONE),
    _T.BVEC4: _TypeInfo(_C.VECTOR, _B.BOOL, "bvec4", GL_BOOL_VEC4, 4, _T.NONE, _T.NONE),
    _T.IVEC2: _TypeInfo(_C.VECTOR, _B.INT, "ivec2", GL_INT_VEC2, 2, _T.NONE, _T.NONE),
    _T.IVEC3: _TypeInfo(_C.VECTOR, _B.INT, "ivec3", GL_INT_VEC3, 3, _T.NONE, _T.NONE),
    _T.IVEC4: _TypeInfo(_C.VECTOR, _B.INT, "ivec4", GL_INT_VEC4, 4, _T.NONE, _T.NONE),
    _T.UVEC2: _TypeInfo(_C.VECTOR, _B.UINT, "uvec2", GL_UNSIGNED_INT_VEC2, 2, _T.NONE, _T.NONE),
    _T.UVEC3: _TypeInfo(_C.VECTOR, _B.UINT, "uvec3", GL_UNSIGNED_INT_VEC3, 3, _T.NONE, _T.NONE),
    # The uvec4 entry maps to the uvec3 enumerant.
    _T.UVEC4: _TypeInfo(_C.VECTOR, _B.UINT, "uvec4", GL_UNSIGNED_INT_VEC3, 4, _T.NONE, _T.NONE),
    _T.VEC2: _TypeInfo(_C.VECTOR, _B.FLOAT, "vec2", GL_FLOAT_VEC2, 2, _T.NONE, _T.NONE),
    _T.VEC3: _TypeInfo(_C.VECTOR, _B.FLOAT, "vec3", GL_FLOAT_VEC3, 3, _T.NONE, _T.NONE),
    _T.VEC4: _TypeInfo(_C.VECTOR, _B.FLOAT, "vec4", GL_FLOAT_VEC4, 4, _T.NONE, _T.NONE),
    _T.MAT2: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat2", GL_FLOAT_MAT2, 4, _T.VEC2, _T.VEC2),
    _T.MAT2x2: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat2x2", GL_FLOAT_MAT2, 4, _T.VEC2, _T.VEC2),
    _T.MAT3: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat3", GL_FLOAT_MAT3, 9, _T.VEC3, _T.VEC3),
    _T.MAT3x3: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat3x3", GL_FLOAT_MAT3, 9, _T.VEC3, _T.VEC3),
    _T.MAT4: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat4", GL_FLOAT_MAT4, 16, _T.VEC4, _T.VEC4),
    _T.MAT4x4: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat4x4", GL_FLOAT_MAT4, 16, _T.VEC4, _T.VEC4),
    _T.MAT2x3: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat2x3", GL_FLOAT_MAT2x3, 6, _T.VEC2, _T.VEC2),
    _T.MAT2x4: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat2x4", GL_FLOAT_MAT2x4, 8, _T.VEC2, _T.VEC4),
    _T.MAT3x2: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat3x2", GL_FLOAT_MAT3x2, 6, _T.VEC3, _T.VEC2),
    _T.MAT3x4: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat3x4", GL_FLOAT_MAT3x4, 12, _T.VEC3, _T.VEC4),
    _T.MAT4x2: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat4x2", GL_FLOAT_MAT4x2, 8, _T.VEC4, _T.VEC2),
    _T.MAT4x3: _TypeInfo(_C.MATRIX, _B.FLOAT, "mat4x3", GL_FLOAT_MAT4x3, 12, _T.VEC4, _T.VEC3),
    _T.TEXTURE2D: _TypeInfo(_C.TEXTURE, _B.UINT, "sampler2D", GL_TEXTURE_2D, 1, _T.NONE, _T.NONE),
    _T.STRUCT: _TypeInfo(_C.STRUCT, _B.NONE, "struct", GL_INVALID_ENUM, 0, _T.NONE, _T.NONE),
}

# Names that can be looked up; "struct" and the invalid name are excluded.
_NAME_TO_TYPE: dict[str, ShaderDataType] = {
    info.name: data_type
    for data_type, info in _TYPE_INFO.items()
    if ShaderDataType.NONE < data_type < ShaderDataType.STRUCT
}

_BASE_TYPE_SIZES = {
    _B.NONE: 0,
    _B.BOOL: 4,
    _B.INT: 4,
    _B.UINT: 4,
    _B.UINT64: 8,
    _B.FLOAT: 4,
}

_BASE_TYPE_GL = {
    _B.NONE: GL_INVALID_ENUM,
    _B.BOOL: GL_BOOL,
    _B.INT: GL_INT,
    _B.UINT: GL_UNSIGNED_INT,
    _B.UINT64: GL_INVALID_ENUM,
    _B.FLOAT: GL_FLOAT,
}

_DOMAIN_GL = {
    ShaderDomain.VERTEX: GL_VERTEX_SHADER,
    ShaderDomain.FRAGMENT: GL_FRAGMENT_SHADER,
    ShaderDomain.GEOMETRY: GL_GEOMETRY_SHADER,
}


class ShaderDomains:
    """A set of shader domains stored as a bit mask."""

    __slots__ = ("_mask",)

    def __init__(self) -> None:
        self._mask = 0

    def add_domain(self, domain: ShaderDomain) -> None:
        self._mask |= 1 << ShaderDomain(domain)

    def add_domains(self, domains: "ShaderDomains") -> None:
        self._mask |= domains._mask

    def remove_domain(self, domain: ShaderDomain) -> None:
        self._mask &= ~(1 << ShaderDomain(domain))

    def is_domain(self, domain: ShaderDomain) -> bool:
        return bool(self._mask & (1 << ShaderDomain(domain)))

    def __contains__(self, domain: object) -> bool:
        return isinstance(domain, int) and self.is_domain(ShaderDomain(domain))

    def __iter__(self):
        return (d for d in ShaderDomain if self.is_domain(d))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShaderDomains):
            return NotImplemented
        return self._mask == other._mask

    def __hash__(self) -> int:
        return hash(self._mask)

    def __repr__(self) -> str:
        names = ", ".join(d.name for d in self)
        return f"ShaderDomains({names})"


def _info(data_type: ShaderDataType) -> _TypeInfo:
    return _TYPE_INFO[ShaderDataType(data_type)]


def string_to_shader_data_type(text: str) -> ShaderDataType:
    """Return the type named by a GLSL type keyword, or NONE if unknown."""
    return _NAME_TO_TYPE.get(text, ShaderDataType.NONE)


def shader_data_type_to_string(data_type: ShaderDataType) -> str:
    return _info(data_type).name


def uint_to_shader_data_type(value: int) -> ShaderDataType:
    """Convert an integer to a type; out-of-range values give NONE."""
    if 0 <= value <= ShaderDataType.STRUCT:
        return ShaderDataType(value)
    return ShaderDataType.NONE


def component_count(data_type: ShaderDataType) -> int:
    return _info(data_type).components


def size_of_shader_data_type(data_type: ShaderDataType) -> int:
    """Size in bytes: component count times the size of the base type."""
    info = _info(data_type)
    return info.components * _BASE_TYPE_SIZES[info.base_type]


def _matrix_info(data_type: ShaderDataType) -> _TypeInfo:
    info = _info(data_type)
    if info.data_class != ShaderDataClass.MATRIX:
        raise ValueError(f"{ShaderDataType(data_type).name} is not a matrix type")
    return info


def row_vector_from_matrix(data_type: ShaderDataType) -> ShaderDataType:
    return _matrix_info(data_type).row_type


def column_vector_from_matrix(data_type: ShaderDataType) -> ShaderDataType:
    return _matrix_info(data_type).column_type


def shader_data_class(data_type: ShaderDataType) -> ShaderDataClass:
    return _info(data_type).data_class


def shader_data_base_type(data_type: ShaderDataType) -> ShaderDataBaseType:
    return _info(data_type).base_type


def size_of_shader_data_base_type(base_type: ShaderDataBaseType) -> int:
    return _BASE_TYPE_SIZES[ShaderDataBaseType(base_type)]


def shader_data_type_to_gl(data_type: ShaderDataType) -> int:
    return _info(data_type).gl


def shader_data_base_type_to_gl(base_type: ShaderDataBaseType) -> int:
    return _BASE_TYPE_GL[ShaderDataBaseType(base_type)]


def shader_domain_to_gl(domain: ShaderDomain) -> int:
    try:
        return _DOMAIN_GL[ShaderDomain(domain)]
    except ValueError:
        raise ValueError(f"unknown shader domain: {domain!r}") from None