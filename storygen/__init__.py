"""Generate Storybook knob stories from Angular component inputs."""

from .inputs import get_input_descriptors, get_input_property_declarations
from .models import GenerationSchema, InputDescriptor, KnobType
from .parsing import SourceUnavailableError
from .story import create_component_stories_file, generate, relative_module_path
from .tree import FileTree, HostTree, VirtualTree

__all__ = [
    "FileTree",
    "GenerationSchema",
    "HostTree",
    "InputDescriptor",
    "KnobType",
    "SourceUnavailableError",
    "VirtualTree",
    "create_component_stories_file",
    "generate",
    "get_input_descriptors",
    "get_input_property_declarations",
    "relative_module_path",
]
