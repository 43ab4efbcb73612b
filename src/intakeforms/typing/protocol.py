"""Collaborator interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from intakeforms.typing.models import Answers


class AnswerStore(Protocol):
    """Key-value store for answer snapshots, keyed by form title."""

    def load(self, form_title: str) -> dict[str, object] | None:
        """Return the saved answers for a form.

        Args:
            form_title: Title of the form.

        Returns:
            dict[str, object] | None: Saved snapshot, or None when nothing is stored.
        """

    def save(self, form_title: str, answers: Answers) -> None:
        """Persist an answer snapshot.

        Args:
            form_title: Title of the form.
            answers: Snapshot to store.
        """

    def delete(self, form_title: str) -> None:
        """Forget the stored snapshot for a form.

        Args:
            form_title: Title of the form.
        """
