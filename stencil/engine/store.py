"""Name-keyed storage of template bodies."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import TemplateNotFound


DEFAULT_EXTENSION = ".txt"


@dataclass(frozen=True)
class Template:
    """A registered template body and the extension of the file it produces."""

    name: str
    body: str
    extension: str = DEFAULT_EXTENSION


class TemplateStore:
    """Registry of :class:`Template` records.

    Re-registering a name replaces the earlier template.  Populate the store
    before rendering starts; it is not meant to be mutated while renders are
    running on other threads.
    """

    def __init__(self) -> None:
        self._templates: dict[str, Template] = {}

    def register(self, template: Template) -> None:
        self._templates[template.name] = template

    def get(self, name: str) -> Template:
        """Return the template called *name*.

        Raises:
            TemplateNotFound: If no template of that name is registered.
        """
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateNotFound(name, self.list()) from None

    def list(self) -> list[str]:
        return sorted(self._templates)

    def clear(self) -> None:
        self._templates.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)
