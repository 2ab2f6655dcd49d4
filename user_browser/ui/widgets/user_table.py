"""
DataTable showing the users on the current page
"""

from typing import Optional, Sequence

from rich.text import Text
from textual.widgets import DataTable

from user_browser.models.user import User


class UserTable(DataTable):
    """Read-only table of id / name / email."""

    COLUMNS = ("ID", "Name", "Email")

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.cursor_type = "row"
        self.zebra_stripes = True

    def show_users(self, users: Sequence[User]) -> None:
        """Replace the rows with `users`, keeping their order."""
        if not self.columns:
            self.add_columns(*self.COLUMNS)

        self.clear()
        for user in users:
            self.add_row(
                Text(str(user.id), style="bold"),
                user.name,
                Text(user.email, style="dim"),
            )
