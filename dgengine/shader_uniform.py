"""Uniform declarations parsed out of GLSL shader sources."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum

from .serialize import deserialize_values, serialize_values
from .shader_source import ShaderSource, ShaderSourceElement
from .shader_utils import (
    ShaderDataType,
    ShaderDomain,
    ShaderDomains,
    shader_data_type_to_string,
    size_of_shader_data_type,
    string_to_shader_data_type,
)

_log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Uniform buffer element header
# ---------------------------------------------------------------------------

_SIZE_BEGIN = 0
_SIZE_BITS = 24
_FLAGS_BEGIN = _SIZE_BEGIN + _SIZE_BITS
_SIZE_MASK = (1 << _SIZE_BITS) - 1
_UINT32_MASK = 0xFFFFFFFF
_HEADER_SIZE = 4


class HeaderFlag(IntEnum):
    """Flags stored in the top byte of a uniform buffer element header."""

    ELEMENT_LOCKED = 0
    IS_INVALID = 1
    UNUSED_2 = 2
    UNUSED_3 = 3
    UNUSED_4 = 4
    UNUSED_5 = 5
    UNUSED_6 = 6
    UNUSED_7 = 7


@dataclass
class UniformBufferElementHeader:
    """A 32-bit header: a 24-bit element size followed by 8 flag bits."""

    data: int = 0

    @property
    def size(self) -> int:
        return (self.data >> _SIZE_BEGIN) & _SIZE_MASK

    @size.setter
    def size(self, count: int) -> None:
        if not 0 <= count <= _SIZE_MASK:
            raise ValueError(f"element size {count} does not fit in {_SIZE_BITS} bits")
        cleared = self.data & ~(_SIZE_MASK << _SIZE_BEGIN) & _UINT32_MASK
        self.data = cleared | (count << _SIZE_BEGIN)

    def set_flag(self, flag: HeaderFlag, value: bool) -> None:
        bit = 1 << (_FLAGS_BEGIN + HeaderFlag(flag))
        if value:
            self.data = (self.data | bit) & _UINT32_MASK
        else:
            self.data = self.data & ~bit & _UINT32_MASK

    def is_set(self, flag: HeaderFlag) -> bool:
        return bool(self.data & (1 << (_FLAGS_BEGIN + HeaderFlag(flag))))

    def serialize(self) -> bytes:
        return serialize_values("I", [self.data])

    @classmethod
    def deserialize(
        cls, data: bytes, offset: int = 0
    ) -> tuple["UniformBufferElementHeader", int]:
        """Read a header at ``offset``; returns it and the offset past it."""
        (value,), end = deserialize_values("I", data, 1, offset)
        return cls(value), end


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class ShaderUniformDeclaration:
    """One uniform: its type, name, element count and the domains using it."""

    data_type: ShaderDataType
    name: str
    declared_array: bool = False
    count: int = 1
    domains: ShaderDomains = field(default_factory=ShaderDomains)
    data_offset: int = 0

    def __post_init__(self) -> None:
        if ShaderDataType(self.data_type) == ShaderDataType.STRUCT:
            raise ValueError("a uniform declaration cannot have the struct type")
        self.data_type = ShaderDataType(self.data_type)

    def is_array(self) -> bool:
        return self.count > 1

    def data_size(self) -> int:
        """Bytes needed in a uniform buffer, header included."""
        return size_of_shader_data_type(self.data_type) * self.count + _HEADER_SIZE

    def describe(self) -> str:
        """Return a one-line description of the declaration."""
        return (
            f"UNIFORM - name: {self.name}, count: {self.count}, "
            f"type: {shader_data_type_to_string(self.data_type)}, "
            f"IsVS: {self.domains.is_domain(ShaderDomain.VERTEX)}, "
            f"IsFS: {self.domains.is_domain(ShaderDomain.FRAGMENT)}, "
            f"IsGS: {self.domains.is_domain(ShaderDomain.GEOMETRY)}"
        )

    def log(self) -> str:
        """Write the description to the debug log and return it."""
        text = self.describe()
        _log.debug("%s", text)
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShaderUniformDeclaration):
            return NotImplemented
        return (
            self.name == other.name
            and self.data_type == other.data_type
            and self.count == other.count
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass
class ShaderStruct:
    """A GLSL struct flattened into its fields."""

    name: str
    fields: list[ShaderUniformDeclaration] = field(default_factory=list)

    def add_field(self, field: ShaderUniformDeclaration) -> None:  # noqa: F811
        self.fields.append(field)


@dataclass(frozen=True)
class VarDecl:
    """A variable declaration found in source text."""

    type_name: str
    name: str
    is_array: bool
    count: int


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

_OS = r"[\s\n\r]*"
_S = r"[\s\n\r]+"
_VAR = r"([_a-zA-Z][_a-zA-Z0-9]*)"
_OARRAY = r"(?:(?:\[)" + _OS + r"([0-9]+)" + _OS + r"(?:\]))?"
_SC = r"[;]"
_BLOCK_CONTENTS = r"(?:[^{]*)[{]([^}]*)"

_VAR_RE = re.compile(_VAR + _S + _VAR + _OS + _OARRAY + _OS + _SC)
_UNIFORM_VAR_RE = re.compile(
    r"(?:uniform)" + _S + _VAR + _S + _VAR + _OS + _OARRAY + _OS + _SC
)
_STRUCT_RE = re.compile(r"(?:struct)" + _S + _VAR + _BLOCK_CONTENTS)

_TEXTURE_TYPES = frozenset({"sampler2D", "samplerCube", "sampler2DShadow"})


def _find(text: str, pattern: re.Pattern[str]) -> list[VarDecl]:
    result = []
    for match in pattern.finditer(text):
        array_size = match.group(3)
        if array_size:
            result.append(VarDecl(match.group(1), match.group(2), True, int(array_size)))
        else:
            result.append(VarDecl(match.group(1), match.group(2), False, 1))
    return result


def find_declarations(text: str) -> list[VarDecl]:
    """Return every ``type name[N];`` declaration in ``text``."""
    return _find(text, _VAR_RE)


def find_uniform_declarations(text: str) -> list[VarDecl]:
    """Return every ``uniform type name[N];`` declaration in ``text``."""
    return _find(text, _UNIFORM_VAR_RE)


def is_texture_type(type_name: str) -> bool:
    return type_name in _TEXTURE_TYPES


def _find_struct(name: str, structs: list[ShaderStruct]) -> ShaderStruct | None:
    return next((s for s in structs if s.name == name), None)


# ---------------------------------------------------------------------------
# Shader data
# ---------------------------------------------------------------------------


class ShaderData:
    """Shader sources together with the uniforms declared in them."""

    def __init__(self, elements: Iterable[ShaderSourceElement] = ()) -> None:
        self.source = ShaderSource()
        self.uniforms: list[ShaderUniformDeclaration] = []
        self.uniform_data_size = 0
        self.load(elements)

    def load(self, elements: Iterable[ShaderSourceElement]) -> None:
        """Replace the sources and re-extract all uniforms.

        Raises ValueError if a uniform has a type that is neither a known
        GLSL type nor a struct defined in the same domain.
        """
        self.clear()
        self.source.load(elements)
        for domain in ShaderDomain:
            structs = self._extract_structs(domain)
            self._extract_uniforms(domain, structs)
        self._assign_offsets()

    def clear(self) -> None:
        self.uniforms = []

    def find_uniform(self, name: str) -> ShaderUniformDeclaration | None:
        return next((u for u in self.uniforms if u.name == name), None)

    def find_uniform_index(self, name: str) -> int | None:
        return next((i for i, u in enumerate(self.uniforms) if u.name == name), None)

    def log(self) -> list[str]:
        """Log every uniform and return the logged lines."""
        return [uniform.log() for uniform in self.uniforms]

    def _extract_structs(self, domain: ShaderDomain) -> list[ShaderStruct]:
        structs: list[ShaderStruct] = []
        for match in _STRUCT_RE.finditer(self.source.get(domain)):
            new_struct = ShaderStruct(match.group(1))
            for var in find_declarations(match.group(2)):
                data_type = string_to_shader_data_type(var.type_name)
                if data_type != ShaderDataType.NONE:
                    new_struct.add_field(
                        ShaderUniformDeclaration(data_type, var.name, var.is_array, var.count)
                    )
                    continue
                inner = _find_struct(var.type_name, structs)
                if inner is None:
                    _log.warning(
                        "Unrecognised field '%s' in struct '%s' while parsing glsl struct.",
                        var.type_name,
                        match.group(1),
                    )
                    continue
                for inner_field in inner.fields:
                    new_struct.add_field(
                        ShaderUniformDeclaration(
                            inner_field.data_type,
                            f"{var.name}.{inner_field.name}",
                            var.is_array,
                            var.count,
                        )
                    )
            structs.append(new_struct)
        return structs

    def _extract_uniforms(self, domain: ShaderDomain, structs: list[ShaderStruct]) -> None:
        for var in find_uniform_declarations(self.source.get(domain)):
            data_type = string_to_shader_data_type(var.type_name)
            if data_type != ShaderDataType.NONE:
                decl = ShaderUniformDeclaration(data_type, var.name, var.is_array, var.count)
                decl.domains.add_domain(domain)
                self._push_uniform(decl)
                continue
            struct = _find_struct(var.type_name, structs)
            if struct is None:
                raise ValueError(f"undefined struct '{var.type_name}' for uniform '{var.name}'")
            for struct_field in struct.fields:
                decl = ShaderUniformDeclaration(
                    struct_field.data_type,
                    f"{var.name}.{struct_field.name}",
                    struct_field.is_array(),
                    struct_field.count,
                )
                decl.domains.add_domain(domain)
                self._push_uniform(decl)

    def _push_uniform(self, decl: ShaderUniformDeclaration) -> None:
        for existing in self.uniforms:
            if existing == decl:
                existing.domains.add_domains(decl.domains)
                return
        self.uniforms.append(decl)

    def _assign_offsets(self) -> None:
        offset = 0
        for uniform in self.uniforms:
            uniform.data_offset = offset
            offset += uniform.data_size()
        self.uniform_data_size = offset