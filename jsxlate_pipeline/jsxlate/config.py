from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Set

from .errors import InternalError

@dataclass
class TranslatorConfig:
    # Attributes shown to translators, which they may insert and modify.
    # Everything else on an element is hidden behind its designation.
    allowed_attributes_by_component: Dict[str, Set[str]] = field(default_factory=lambda: {
        "a": {"href"},
    })

    # Reserved markers consumed from source
    string_marker: str = "i18n"
    element_marker: str = "I18N"
    designation_attribute: str = "i18n-designation"

    # "module" or "script"
    source_type: str = "module"
    log_level: str = "INFO"

    def allowed_attributes(self, component_name: str) -> Set[str]:
        return self.allowed_attributes_by_component.get(component_name, set())

    def attribute_is_safe(self, component_name: str, attribute_name: str | None) -> bool:
        if not component_name:
            raise InternalError("Component name missing.")
        return attribute_name in self.allowed_attributes(component_name)


DEFAULT_CONFIG = TranslatorConfig()
