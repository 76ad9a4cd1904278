from .base import ForgeAdapter
from .github import GitHubAdapter
from .opengrok import OpenGrokAdapter

__all__ = ["ForgeAdapter", "GitHubAdapter", "OpenGrokAdapter"]
