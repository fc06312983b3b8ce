"""goat scaffolder -- generates Goat Stack project structures.

Quick usage::

    from goat.scaffolder import ProjectDescriptor, ProjectGenerator

    project = ProjectDescriptor(project_name="my-project", module_name="my-module")
    project_path = await ProjectGenerator(project).generate()
"""

from goat.scaffolder.generator import CommandError, ProjectDescriptor, ProjectGenerator
from goat.scaffolder.patching import ConfigPatchError

__all__ = [
    "CommandError",
    "ConfigPatchError",
    "ProjectDescriptor",
    "ProjectGenerator",
]
