"""Partition of node identifiers into shared, subject-only and object-only ranges."""

from dataclasses import dataclass

from ..exceptions import IdSpaceError


@dataclass(frozen=True, slots=True)
class IdSpace:
    """Role membership checks over the three dictionary sections.

    Node ids start at 1. Ids ``1..n_shared`` occur as subject and as
    object. Ids above ``n_shared`` are ambiguous on their own: read
    under the subject role they denote subject-only terms (up to
    ``n_subjects``), under the object role object-only terms (up to
    ``n_objects``). Id ``0`` is the unbound wildcard and never a member.

    Parameters
    ----------
    n_shared : int
        Last id of the shared section.
    n_subjects : int
        Last id of the subject section (shared ids included).
    n_objects : int
        Last id of the object section (shared ids included).

    Raises
    ------
    IdSpaceError
        If a count is negative or the shared section exceeds either
        role section.
    """

    n_shared: int
    n_subjects: int
    n_objects: int

    def __post_init__(self) -> None:
        """Validate the section counts."""
        if min(self.n_shared, self.n_subjects, self.n_objects) < 0:
            raise IdSpaceError(
                f"Section counts must be non-negative, got shared={self.n_shared}, "
                f"subjects={self.n_subjects}, objects={self.n_objects}"
            )
        if self.n_shared > self.n_subjects:
            raise IdSpaceError(
                f"n_shared ({self.n_shared}) must be <= n_subjects ({self.n_subjects})"
            )
        if self.n_shared > self.n_objects:
            raise IdSpaceError(
                f"n_shared ({self.n_shared}) must be <= n_objects ({self.n_objects})"
            )

    def is_shared(self, node_id: int) -> bool:
        return 1 <= node_id <= self.n_shared

    def is_subject_only(self, node_id: int) -> bool:
        return self.n_shared < node_id <= self.n_subjects

    def is_object_only(self, node_id: int) -> bool:
        return self.n_shared < node_id <= self.n_objects

    def may_act_as_subject(self, node_id: int) -> bool:
        """Return whether ``node_id`` is a valid id under the subject role."""
        return 1 <= node_id <= self.n_subjects

    def may_act_as_object(self, node_id: int) -> bool:
        """Return whether ``node_id`` is a valid id under the object role."""
        return 1 <= node_id <= self.n_objects
