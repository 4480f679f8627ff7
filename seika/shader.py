"""Shader instances: a compiled shader plus named, typed uniform parameters."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

ParamValue = bool | int | float | tuple[float, ...]


class ShaderParamType(enum.IntEnum):
    """Kind of value a uniform parameter holds."""

    BOOL = 0
    INT = 1
    FLOAT = 2
    FLOAT2 = 3
    FLOAT3 = 4
    FLOAT4 = 5

    @property
    def components(self) -> int:
        """Number of float components for vector types, 1 for scalars."""
        return {
            ShaderParamType.FLOAT2: 2,
            ShaderParamType.FLOAT3: 3,
            ShaderParamType.FLOAT4: 4,
        }.get(self, 1)


class ShaderInstanceType(enum.IntEnum):
    """What a shader instance draws."""

    INVALID = -1
    SCREEN = 0
    SPRITE = 1


class ShaderParamError(ValueError):
    """Raised for a missing parameter, a type mismatch or an unusable value."""


@dataclass
class ShaderParam:
    """A named uniform parameter with its type and current value."""

    name: str
    type: ShaderParamType
    value: ParamValue


def _coerce(param_type: ShaderParamType, value: Any, name: str) -> ParamValue:
    param_type = ShaderParamType(param_type)
    try:
        if param_type is ShaderParamType.BOOL:
            return bool(value)
        if param_type is ShaderParamType.INT:
            if isinstance(value, float) and not value.is_integer():
                raise ShaderParamError(f"param '{name}' expects an integer, got {value!r}")
            result = int(value)
            if not _INT32_MIN <= result <= _INT32_MAX:
                raise ShaderParamError(
                    f"param '{name}' value {result} does not fit a 32-bit integer"
                )
            return result
        if param_type is ShaderParamType.FLOAT:
            return float(value)
        components = tuple(float(v) for v in value)
    except (TypeError, ValueError) as err:
        if isinstance(err, ShaderParamError):
            raise
        raise ShaderParamError(
            f"param '{name}' cannot hold {value!r} as {param_type.name}"
        ) from err
    if len(components) != param_type.components:
        raise ShaderParamError(
            f"param '{name}' of type {param_type.name} needs "
            f"{param_type.components} components, got {len(components)}"
        )
    return components


class ShaderInstance:
    """A shader together with its own set of uniform parameters."""

    def __init__(self, shader: Any) -> None:
        if shader is None:
            raise ValueError("shader must not be None")
        self.shader = shader
        self._params: dict[str, ShaderParam] = {}
        self.params_dirty = True

    @property
    def params(self) -> Mapping[str, ShaderParam]:
        """Read-only view of the parameters by name."""
        return MappingProxyType(self._params)

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __len__(self) -> int:
        return len(self._params)

    def create_param(self, name: str, param_type: ShaderParamType, value: Any) -> ShaderParam:
        """Add (or replace) a parameter and return it."""
        param_type = ShaderParamType(param_type)
        param = ShaderParam(name=name, type=param_type, value=_coerce(param_type, value, name))
        self._params[name] = param
        return param

    def create_from_copy(self, param: ShaderParam) -> ShaderParam:
        """Add a parameter copied from ``param``; later changes do not touch the original."""
        return self.create_param(param.name, param.type, param.value)

    def _lookup(self, name: str, param_type: ShaderParamType) -> ShaderParam:
        param = self._params.get(name)
        if param is None:
            raise ShaderParamError(f"shader param '{name}' does not exist")
        if param.type != ShaderParamType(param_type):
            raise ShaderParamError(
                f"shader param '{name}' is {param.type.name}, not "
                f"{ShaderParamType(param_type).name}"
            )
        return param

    def update_param(self, name: str, param_type: ShaderParamType, value: Any) -> None:
        """Set a new value on an existing parameter of the given type."""
        param = self._lookup(name, param_type)
        param.value = _coerce(param.type, value, name)
        self.params_dirty = True

    def get_param(self, name: str, param_type: ShaderParamType) -> ParamValue:
        """Return the value of an existing parameter of the given type."""
        return self._lookup(name, param_type).value

    def take_dirty_params(self) -> list[ShaderParam]:
        """Return the parameters to upload if any changed, and mark them clean."""
        if not self.params_dirty or not self._params:
            return []
        self.params_dirty = False
        return list(self._params.values())