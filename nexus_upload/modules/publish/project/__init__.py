from .descriptor import MtaDescriptor, MtaDescriptorReader
from .structure import ProjectLayout, ProjectStructureDetector

__all__ = [
    "MtaDescriptor",
    "MtaDescriptorReader",
    "ProjectLayout",
    "ProjectStructureDetector",
]
