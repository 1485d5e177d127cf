"""Web target: npm package with TypeScript declarations and style sheets."""

from .api import StyleTokens, WebDependency, WebOutput
from .compiler import WebCompiler

__all__ = ["WebCompiler", "WebOutput", "WebDependency", "StyleTokens"]
