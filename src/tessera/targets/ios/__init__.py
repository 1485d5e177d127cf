"""iOS target: Swift package."""

from .api import IosDependency, IosOutput
from .compiler import IosCompiler

__all__ = ["IosCompiler", "IosOutput", "IosDependency"]
