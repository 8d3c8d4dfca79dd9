from .properties import ClasspathPublisher

__all__ = ["ClasspathPublisher"]
