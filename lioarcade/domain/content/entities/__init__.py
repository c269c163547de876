from .content import Content, ContentType

__all__ = ["Content", "ContentType"]
