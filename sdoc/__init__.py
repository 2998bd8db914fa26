"""SDoc: sectioned, searchable documents from annotated source."""

from sdoc.processor import SdocProcessor, process

__all__ = ["SdocProcessor", "process"]
