"""stencil -- directive template engine and CRUD code generator."""

__version__ = "0.1.0"
