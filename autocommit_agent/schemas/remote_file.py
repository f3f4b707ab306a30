"""
Snapshot of a repository file fetched from the Contents API.
"""

from sqlmodel import SQLModel


class RemoteFile(SQLModel):
    """
    Decoded file content plus the blob sha GitHub requires to overwrite it.
    """

    content: bytes
    sha: str
