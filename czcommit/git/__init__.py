"""Git Operations Package"""

from czcommit.git.runner import VcsPort, GitRunner, ProcessResult, GitError, CommitError
from czcommit.git.committer import Committer

__all__ = [
    "VcsPort",
    "GitRunner",
    "ProcessResult",
    "GitError",
    "CommitError",
    "Committer",
]
