"""Data model for service and endpoint declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class ParamDef:
    name: str
    datatype: str
    multiple: bool = False
    nullable: bool = False
    desc: str = ""

    def signature(self) -> str:
        """Compact form, e.g. `uris: string*?`."""
        return f"{self.name}: {self.datatype}{'*' if self.multiple else ''}{'?' if self.nullable else ''}"


@dataclass(slots=True)
class ReturnDef:
    datatype: str
    multiple: bool = False
    nullable: bool = False
    desc: str = ""

    def signature(self) -> str:
        return f"{self.datatype}{'*' if self.multiple else ''}{'?' if self.nullable else ''}"


@dataclass(slots=True)
class EndpointDeclaration:
    """One `<functionName>.api` file plus the module that implements it."""

    function_name: str
    params: list[ParamDef] = field(default_factory=list)
    returns: ReturnDef | None = None
    desc: str = ""
    endpoint: str = ""
    source: Path | None = None
    module_extension: str | None = None

    def param(self, name: str) -> ParamDef | None:
        for p in self.params:
            if p.name == name:
                return p
        return None

    @property
    def param_names(self) -> list[str]:
        return [p.name for p in self.params]

    def signature(self) -> str:
        args = ", ".join(p.signature() for p in self.params)
        ret = self.returns.signature() if self.returns is not None else "void"
        return f"{self.function_name}({args}) -> {ret}"


@dataclass(slots=True)
class ServiceDeclaration:
    """A `service.json` and the endpoint declarations that sit beside it."""

    path: Path
    endpoint_directory: str
    java_class: str = ""
    endpoints: dict[str, EndpointDeclaration] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def directory(self) -> Path:
        return self.path.parent

    def endpoint_names(self) -> list[str]:
        return sorted(self.endpoints)
