"""Pydantic models describing code generation requests and results."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldSpec(BaseModel):
    """One field of a CRUD model as seen by the list/detail/mock templates.

    Unknown keys are kept so custom templates can read extra attributes.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1)
    label: str = Field(default="", description="Display label, defaults to the name")
    type: str = Field(default="string", description="Mock data type (string, number, email...)")
    component: str = Field(default="ui-textfield")
    required: bool = False
    sortable: bool = False
    width: Optional[int] = None
    validation: Optional[str] = None
    placeholder: Optional[str] = None
    options: Optional[list[Any]] = None
    props: Optional[dict[str, Any]] = None

    @model_validator(mode="after")
    def _default_label(self) -> "FieldSpec":
        if not self.label:
            self.label = self.name
        return self


class CustomMethod(BaseModel):
    """An extra mock-server endpoint beyond the standard CRUD five."""

    key: str = Field(..., min_length=1)
    description: str = ""


class CrudModuleOptions(BaseModel):
    """Everything needed to generate one CRUD module."""

    module: str = Field(..., min_length=1, description="Module name, e.g. 'user-profile'")
    model: str = Field(..., min_length=1, description="Backing model name, e.g. 'UserProfile'")
    project_path: Path
    fields: list[FieldSpec] = Field(default_factory=list)
    title: Optional[str] = None
    endpoint: Optional[str] = None
    requires_auth: bool = True
    permissions: list[str] = Field(default_factory=list)
    custom_methods: list[CustomMethod] = Field(default_factory=list)
    has_custom_actions: bool = False
    validation_rules: Optional[dict[str, Any]] = None
    form_layout: Optional[str] = None
    submit_text: Optional[str] = None
    cancel_text: Optional[str] = None


class GeneratedFile(BaseModel):
    """A file written by the generator."""

    path: Path
    template: str
    content: str


class CrudModuleResult(BaseModel):
    """Outcome of :meth:`CodeGenerator.generate_crud_module`."""

    module: str
    model: str
    endpoint: str
    files: list[GeneratedFile] = Field(default_factory=list)
    summary: dict[str, Any] = Field(default_factory=dict)

    @property
    def total_files(self) -> int:
        return len(self.files)
