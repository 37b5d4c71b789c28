"""
Errors raised by the init engine.

ConfigReadError is fatal to a run. The remaining errors are raised by
auxiliary steps and are downgraded to warnings by the init command.
"""

class ScaffoldError(Exception):
    """Base class for init engine errors."""

class ConfigReadError(ScaffoldError):
    """components.json exists but could not be read or parsed."""

class DependencyInstallError(ScaffoldError):
    """The package manager could not be started or exited with an error."""

    def __init__(self, message: str, command=None, returncode=None):
        super().__init__(message)
        self.command = command
        self.returncode = returncode

class TokenInjectionError(ScaffoldError):
    """No insertion point for the design tokens was found in the target file."""
