# Progopts project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

__all__ = ["__version__", "__version_tuple__"]

__version__ = "0.1.0"
__version_tuple__ = (0, 1, 0)
