from .step_10_create_directory import CreateDirectoryStep
from .step_20_load_manifest import LoadManifestStep
from .step_30_materialize_tree import MaterializeTreeStep
from .step_40_write_manifest import WriteManifestStep
from .step_50_install_dependencies import InstallDependenciesStep
from .step_60_print_instructions import PrintInstructionsStep

__all__ = [
    "CreateDirectoryStep",
    "LoadManifestStep",
    "MaterializeTreeStep",
    "WriteManifestStep",
    "InstallDependenciesStep",
    "PrintInstructionsStep",
]
