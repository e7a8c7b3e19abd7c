"""Service and endpoint declarations: models, datatype catalog, loader."""

from .datatypes import NODE_FORMATS, document_format, is_known_datatype
from .loader import load_service_declaration, parse_endpoint_declaration
from .models import EndpointDeclaration, ParamDef, ReturnDef, ServiceDeclaration

__all__ = [
    "EndpointDeclaration",
    "NODE_FORMATS",
    "ParamDef",
    "ReturnDef",
    "ServiceDeclaration",
    "document_format",
    "is_known_datatype",
    "load_service_declaration",
    "parse_endpoint_declaration",
]
