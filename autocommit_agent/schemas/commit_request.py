"""
Commit request DTO: the PUT the agent decided to issue.
"""

import base64
from typing import Any, Dict

from sqlmodel import SQLModel


class CommitRequest(SQLModel):
    """
    Everything needed to write one file back through the Contents API.

    `sha` is always the one returned by the fetch of the same run.
    """

    owner: str
    repository: str
    path: str
    message: str
    committer_name: str
    committer_email: str
    content: bytes
    sha: str

    def encoded_content(self) -> str:
        """Strict base64 (no line breaks) of the new content."""
        return base64.b64encode(self.content).decode("ascii")

    def body(self) -> Dict[str, Any]:
        """JSON body of the PUT request."""
        return {
            "message": self.message,
            "committer": {
                "name": self.committer_name,
                "email": self.committer_email,
            },
            "content": self.encoded_content(),
            "sha": self.sha,
        }
