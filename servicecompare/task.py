"""Service-compare task: resolve the two declaration paths and run one comparison."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, Optional, Protocol

from servicecompare.errors import MissingArgumentError
from servicecompare.logging import get_logger

CUSTOM_PROPERTY = "customServiceDeclarationFile"
BASE_PROPERTY = "baseServiceDeclarationFile"

_log = get_logger("task")


class ServiceComparer(Protocol):
    def compare_services(self, custom_path: str, base_path: Optional[str] = None) -> object: ...


@dataclass(slots=True, frozen=True)
class ServiceCompareConfig:
    custom_service_declaration_file: str = ""
    base_service_declaration_file: str = ""


def resolve_config(config: ServiceCompareConfig, properties: Mapping[str, str] | None = None) -> ServiceCompareConfig:
    """
    Fill unset fields from properties.

    The custom file is required: raise MissingArgumentError when it is neither
    set nor present in properties. A missing base file means "no base".
    """
    props = properties or {}
    custom = config.custom_service_declaration_file
    if not custom:
        custom = props.get(CUSTOM_PROPERTY) or ""
        if not custom:
            raise MissingArgumentError(CUSTOM_PROPERTY)
    base = config.base_service_declaration_file or props.get(BASE_PROPERTY) or ""
    return replace(config, custom_service_declaration_file=custom, base_service_declaration_file=base)


class ServiceCompareTask:
    """Compares a custom service declaration with its base."""

    def __init__(
        self,
        config: ServiceCompareConfig,
        properties: Mapping[str, str] | None = None,
        generator: ServiceComparer | None = None,
    ) -> None:
        if generator is None:
            from servicecompare.generator import Generator

            generator = Generator()
        self.config = config
        self.properties = dict(properties or {})
        self.generator = generator

    def run(self):
        resolved = resolve_config(self.config, self.properties)
        base = resolved.base_service_declaration_file or None
        _log.debug(
            "servicecompare: custom=%s base=%s",
            resolved.custom_service_declaration_file,
            base or "(none)",
        )
        return self.generator.compare_services(resolved.custom_service_declaration_file, base)


def compare_custom_service_to_base(
    custom_service_declaration_file: str = "",
    base_service_declaration_file: str = "",
    properties: Mapping[str, str] | None = None,
    generator: ServiceComparer | None = None,
):
    """Convenience wrapper: build the task from plain values and run it."""
    config = ServiceCompareConfig(custom_service_declaration_file, base_service_declaration_file)
    return ServiceCompareTask(config, properties, generator).run()
