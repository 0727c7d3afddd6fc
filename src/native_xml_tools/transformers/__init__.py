"""Transformers for processing Native XML documents."""

from .doi_extractor import DoiExtractor
from .native_xml_filter import NativeXmlFilter
from .transformer import NativeXmlTransformer

__all__ = [
    "NativeXmlTransformer",
    "NativeXmlFilter",
    "DoiExtractor",
]
