"""LazyVim configuration installer for macOS.

Core design goals:
- Fail fast on missing prerequisites
- Delegate "already installed" checks to Homebrew
- Never overwrite an existing configuration
- Centralized logging
"""

__all__ = []
