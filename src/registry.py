"""In-memory person registry."""

import logging
from collections.abc import Iterator

from errors import DuplicatePersonError, PersonNotFoundError
from models import Address, Person
from relationships import check_parent
from tree import TreeIndex

logger = logging.getLogger(__name__)


class PersonManager:
    """
    Owns every person record, keyed by id, plus the tree index derived from them.

    The person map is the single source of truth; parent and spouse links are ids
    resolved through this registry when read.
    """

    def __init__(self):
        self.persons: dict[int, Person] = {}
        self.tree_index = TreeIndex()

    def __len__(self) -> int:
        return len(self.persons)

    def __contains__(self, person_id: int) -> bool:
        return person_id in self.persons

    def __iter__(self) -> Iterator[Person]:
        return iter(self.persons.values())

    def register(self, person: Person, exist_ok: bool = False) -> Person:
        """
        Add a person to the registry and to the tree index.

        Parent ids already carried by the person are validated like any parent link
        and the new tree node is attached under each parent.

        Args:
            person: The record to add.
            exist_ok: Return the registered record instead of raising when the id
                is already present. The existing record is never overwritten.

        Raises:
            DuplicatePersonError: If the id is registered and exist_ok is False.
            PersonNotFoundError, SelfReferenceError, InvalidGenderError: If a
                carried parent id is invalid.
        """
        existing = self.persons.get(person.id)
        if existing is not None:
            if exist_ok:
                return existing
            logger.warning(f"Rejected duplicate registration of {person.id}")
            raise DuplicatePersonError(person.id)

        if person.mother_id is not None:
            check_parent(self, person.id, person.mother_id, "mother")
        if person.father_id is not None:
            check_parent(self, person.id, person.father_id, "father")

        self.persons[person.id] = person
        node = self.tree_index.add(person)
        for parent_id in (person.mother_id, person.father_id):
            if parent_id is not None:
                self.tree_index.attach_child(parent_id, node)
        logger.info(f"Registered {person.first_name} {person.last_name} ({person.id})")
        return person

    def lookup(self, person_id: int) -> Person | None:
        return self.persons.get(person_id)

    def get(self, person_id: int, entity: str = "Person") -> Person:
        person = self.persons.get(person_id)
        if person is None:
            raise PersonNotFoundError(person_id, entity)
        return person

    def set_address(self, person_id: int, address: Address) -> None:
        """Replace a person's address; unknown ids are ignored."""
        person = self.persons.get(person_id)
        if person is None:
            logger.debug(f"Ignoring address update for unknown person {person_id}")
            return
        person.address = address

    def children_of(self, person_id: int) -> list[Person]:
        return [
            p for p in self.persons.values() if person_id in (p.mother_id, p.father_id)
        ]

    def roots(self) -> list[Person]:
        return [p for p in self.persons.values() if not p.has_parent()]
