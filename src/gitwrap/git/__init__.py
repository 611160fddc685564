"""Git interface layer — subprocess adapter, option objects, client façade."""

from gitwrap.git.adapter import GitError, check_repository_path, get_repo_root, run_git
from gitwrap.git.client import CLIENT_BACKENDS, CliGitClient, GitClient, get_client
from gitwrap.git.options import AddOptions, CheckoutOptions, CommitOptions, StatusOptions

__all__ = [
    "AddOptions",
    "CLIENT_BACKENDS",
    "CheckoutOptions",
    "CliGitClient",
    "CommitOptions",
    "GitClient",
    "GitError",
    "StatusOptions",
    "check_repository_path",
    "get_client",
    "get_repo_root",
    "run_git",
]
