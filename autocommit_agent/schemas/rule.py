"""
Rule model for the autocommit agent configuration.

Pure data model, no service imports.
"""

from sqlmodel import SQLModel, Field


class Rule(SQLModel):
    """
    Maps a logical repository name to GitHub coordinates and a version line.

    Parsed from the `rules` option, not a database table.
    """

    name: str = Field(default="", description="Logical repository name.")
    owner: str = Field(default="", description="Owner of the target repository.")
    my_repository: str = Field(
        default="", description="Name of the target repository."
    )
    pattern: str = Field(
        default="", description="Regex fragment following `ENV ` on the version line."
    )
    file: str = Field(default="", description="Path of the file in the repository.")
