"""Core data models shared across storygen components."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class KnobType(str, Enum):
    """Storybook knob kinds a component input can be rendered with.

    ``SELECT`` is accepted everywhere a knob kind is expected but no
    inference rule produces it.
    """

    TEXT = "text"
    BOOLEAN = "boolean"
    NUMBER = "number"
    SELECT = "select"


@dataclass(frozen=True)
class InputDescriptor:
    """Knob description extracted from one ``@Input()`` property."""

    name: str
    type: KnobType
    default_value: Optional[str] = None

    @property
    def has_default(self) -> bool:
        return self.default_value is not None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "name": self.name,
            "type": self.type.value,
            "defaultValue": self.default_value,
        }


@dataclass(frozen=True)
class GenerationSchema:
    """Names and paths identifying the component a story is generated for."""

    lib_path: str
    module_file_name: str
    ng_module_class_name: str
    component_name: str
    component_path: str
    component_file_name: str
