"""stencil code generator -- writes CRUD boilerplate into frontend projects.

Quick usage::

    from stencil.generator import CodeGenerator, CrudModuleOptions

    generator = CodeGenerator()
    result = await generator.generate_crud_module(
        CrudModuleOptions(
            module="user-profile",
            model="UserProfile",
            project_path="/work/my-app",
            fields=[{"name": "email", "type": "email"}],
        )
    )
"""

from stencil.generator.code_generator import (
    CodeGenerationError,
    CodeGenerator,
    InvalidTemplateContext,
    ProjectNotFound,
    format_code,
)
from stencil.generator.models import (
    CrudModuleOptions,
    CrudModuleResult,
    CustomMethod,
    FieldSpec,
    GeneratedFile,
)
from stencil.generator.templates import BUILTIN_TEMPLATES, REQUIRED_FIELDS

__all__ = [
    "BUILTIN_TEMPLATES",
    "CodeGenerationError",
    "CodeGenerator",
    "CrudModuleOptions",
    "CrudModuleResult",
    "CustomMethod",
    "FieldSpec",
    "GeneratedFile",
    "InvalidTemplateContext",
    "ProjectNotFound",
    "REQUIRED_FIELDS",
    "format_code",
]
